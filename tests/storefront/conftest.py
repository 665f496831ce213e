"""Shared fixtures and factories for storefront tests."""

import pytest
from protean.utils.globals import current_domain

from storefront.cart.items import AddToCart
from storefront.category.management import CreateCategory
from storefront.identity.registration import register_user
from storefront.payments.gateway import reset_gateway
from storefront.product.creation import CreateProduct

ADDRESS = {
    "full_name": "Jane Doe",
    "address_line1": "1 Main Street",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "US",
    "phone": "5551234567",
}


@pytest.fixture(autouse=True)
def _fresh_gateway():
    yield
    reset_gateway()


@pytest.fixture()
def make_category():
    def _make(name="Laptops", slug="laptops", icon="fas fa-laptop"):
        return current_domain.process(CreateCategory(name=name, slug=slug, icon=icon), asynchronous=False)

    return _make


@pytest.fixture()
def category_id(make_category):
    return make_category()


@pytest.fixture()
def make_product(category_id):
    def _make(**overrides):
        defaults = {
            "name": "ThinkPad X1",
            "description": "14-inch business ultrabook",
            "brand": "Lenovo",
            "image_url": "https://img.example.com/x1.jpg",
            "price": 10.0,
            "condition": "new",
            "category_id": category_id,
            "stock": 5,
        }
        defaults.update(overrides)
        return current_domain.process(CreateProduct(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def shopper_id():
    return register_user(username="shopper", password="shopper-pass")


@pytest.fixture()
def add_to_cart(shopper_id):
    def _add(product_id, quantity=1, user_id=None):
        return current_domain.process(
            AddToCart(user_id=user_id or shopper_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def address():
    return dict(ADDRESS)
