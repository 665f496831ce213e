"""Product aggregate root and its catalogue enumerations."""

from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text

from storefront.domain import storefront


class ProductCondition(Enum):
    NEW = "new"
    REFURBISHED = "refurbished"
    USED = "used"


class Marketplace(Enum):
    AMAZON = "amazon"
    EBAY = "ebay"
    DIRECT = "direct"


# Attributes an admin may change through UpdateProduct. ``stock`` is handled
# separately because it must move together with the inventory record.
EDITABLE_FIELDS = (
    "name",
    "description",
    "brand",
    "image_url",
    "price",
    "original_price",
    "condition",
    "category_id",
    "marketplace",
    "marketplace_id",
    "rating",
    "review_count",
)


@storefront.aggregate(limit=None)
class Product:
    """A sellable catalogue item.

    ``stock`` is a denormalized mirror of the product's InventoryRecord and is
    only ever written together with it (see ``sync_stock``).
    """

    name = String(required=True, max_length=255)
    description = Text(required=True)
    brand = String(required=True, max_length=100)
    image_url = String(required=True, max_length=500)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    condition = String(required=True, choices=ProductCondition)
    category_id = Identifier(required=True)
    marketplace = String(choices=Marketplace)
    marketplace_id = String(max_length=100)
    rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count = Integer(default=0, min_value=0)
    stock = Integer(default=0, min_value=0)

    @invariant.post
    def marketplace_id_requires_marketplace(self):
        if self.marketplace_id and not self.marketplace:
            raise ValidationError({"marketplace_id": ["A marketplace ID requires a marketplace"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        brand,
        image_url,
        price,
        condition,
        category_id,
        original_price=None,
        marketplace=None,
        marketplace_id=None,
        rating=0.0,
        review_count=0,
        stock=0,
    ):
        from storefront.product.events import ProductAdded

        product = cls(
            name=name,
            description=description,
            brand=brand,
            image_url=image_url,
            price=price,
            original_price=original_price,
            condition=condition,
            category_id=category_id,
            marketplace=marketplace,
            marketplace_id=marketplace_id,
            rating=rating if rating is not None else 0.0,
            review_count=review_count if review_count is not None else 0,
            stock=stock or 0,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category_id=category_id,
                price=price,
                condition=condition,
                stock=product.stock,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update of descriptive and pricing attributes."""
        from storefront.product.events import ProductDetailsUpdated

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        with atomic_change(self):
            for field, value in changes.items():
                setattr(self, field, value)

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                updated_fields=",".join(sorted(changes)),
            )
        )

    def sync_stock(self, quantity):
        """Mirror the inventory quantity onto the product."""
        self.stock = quantity

