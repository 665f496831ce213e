"""User aggregate: storefront accounts, shoppers and admins alike."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String

from storefront.domain import storefront
from storefront.identity.events import UserRegistered
from storefront.identity.passwords import verify_password


@storefront.aggregate(limit=None)
class User:
    username = String(required=True, min_length=3, max_length=50)
    password_hash = String(required=True, max_length=255)
    is_admin = Boolean(default=False)
    created_at = DateTime()

    @classmethod
    def register(cls, username, password_hash, is_admin=False):
        user = cls(
            username=username,
            password_hash=password_hash,
            is_admin=bool(is_admin),
            created_at=datetime.now(UTC),
        )
        user.raise_(UserRegistered(user_id=str(user.id), username=username, is_admin=user.is_admin))
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)
