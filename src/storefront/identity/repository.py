"""Repositories for User and UserSession."""

from storefront.domain import storefront
from storefront.identity.session import UserSession
from storefront.identity.user import User


@storefront.repository(part_of=User)
class UserRepository:
    def by_username(self, username) -> User | None:
        results = self._dao.query.filter(username=username).all().items
        return results[0] if results else None


@storefront.repository(part_of=UserSession)
class UserSessionRepository:
    def by_token(self, token) -> UserSession | None:
        if not token:
            return None
        results = self._dao.query.filter(token=token).all().items
        return results[0] if results else None
