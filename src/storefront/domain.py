"""Storefront bounded context: catalogue, inventory, carts, orders and accounts.

A single domain owns every aggregate so that checkout can change the cart,
the order, the inventory records and the product stock mirror inside one
Unit of Work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
