import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from storefront.api import register_error_handlers, routers
from storefront.identity.registration import register_user
from storefront.identity.sessions import login


@pytest.fixture()
def client(_storefront_domain):
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with _storefront_domain.domain_context():
            return await call_next(request)

    for router in routers:
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


def _bearer(username, password, is_admin=False):
    register_user(username=username, password=password, is_admin=is_admin)
    _, token = login(username, password)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers():
    return _bearer("admin", "admin-pass", is_admin=True)


@pytest.fixture()
def shopper_headers():
    return _bearer("buyer", "buyer-pass")


@pytest.fixture()
def address_payload():
    return {
        "fullName": "Jane Doe",
        "addressLine1": "1 Main Street",
        "city": "Springfield",
        "state": "IL",
        "postalCode": "62701",
        "country": "US",
        "phone": "5551234567",
    }
