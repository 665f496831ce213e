"""Storefront error taxonomy.

Field-level and business-rule validation uses Protean's ``ValidationError``
(HTTP 400). The classes below cover the remaining outcomes; each carries the
HTTP status the API layer reports for it.
"""


class StorefrontError(Exception):
    """Base class for storefront errors surfaced directly to callers."""

    status_code = 500

    def __init__(self, message: str, errors: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class NotFoundError(StorefrontError):
    status_code = 404


class ProductNotFoundError(NotFoundError):
    """A cart line points at a product that no longer exists."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID {product_id} not found", {"product_id": [str(product_id)]})
        self.product_id = str(product_id)


class AuthenticationRequiredError(StorefrontError):
    status_code = 401


class AuthorizationError(StorefrontError):
    status_code = 403


class EmptyCartError(StorefrontError):
    status_code = 400

    def __init__(self, message: str = "Your cart is empty") -> None:
        super().__init__(message)


class InsufficientStockError(StorefrontError):
    status_code = 400

    def __init__(self, product_id: str, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient inventory for {product_name}",
            {"product_id": [str(product_id)], "requested": [requested], "available": [available]},
        )
        self.product_id = str(product_id)
        self.product_name = product_name
        self.requested = requested
        self.available = available


class InternalError(StorefrontError):
    status_code = 500
