"""Repository for the ShoppingCart aggregate."""

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront


@storefront.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_user(self, user_id) -> ShoppingCart | None:
        """Return the user's cart, or None if they never added anything."""
        results = self._dao.query.filter(user_id=str(user_id)).all().items
        return results[0] if results else None
