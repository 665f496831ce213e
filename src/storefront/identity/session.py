"""UserSession aggregate: an opaque bearer token bound to one user."""

import secrets
from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.aggregate(limit=None)
class UserSession:
    token = String(required=True, max_length=128)
    user_id = Identifier(required=True)
    created_at = DateTime()

    @classmethod
    def open(cls, user_id):
        return cls(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=datetime.now(UTC),
        )
