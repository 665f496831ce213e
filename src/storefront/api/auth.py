"""Request authentication dependencies.

A session token is read from the ``Authorization: Bearer`` header first and
the ``storefront_session`` cookie second.
"""

from fastapi import Depends, Request

from storefront.errors import AuthenticationRequiredError, AuthorizationError
from storefront.identity.sessions import resolve_user
from storefront.identity.user import User

SESSION_COOKIE = "storefront_session"


def session_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE) or None


async def optional_user(request: Request) -> User | None:
    token = session_token(request)
    return resolve_user(token) if token else None


async def current_user(user: User | None = Depends(optional_user)) -> User:
    if user is None:
        raise AuthenticationRequiredError("You must be logged in")
    return user


async def require_admin(user: User = Depends(current_user)) -> User:
    if not user.is_admin:
        raise AuthorizationError("Admin access required")
    return user
