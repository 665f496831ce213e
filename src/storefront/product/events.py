"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category_id = Identifier(required=True)
    price = Float(required=True)
    condition = String(required=True)
    stock = Integer(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """Descriptive or pricing attributes of a product changed."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    updated_fields = String()

