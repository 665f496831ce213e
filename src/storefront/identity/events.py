"""Domain events for identity."""

from protean.fields import Boolean, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    __version__ = 1

    user_id = Identifier(required=True)
    username = String(required=True)
    is_admin = Boolean(default=False)
