"""Product creation: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.inventory.inventory import InventoryRecord
from storefront.product.product import Product


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    description = Text(required=True)
    brand = String(required=True, max_length=100)
    image_url = String(required=True, max_length=500)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    condition = String(required=True, max_length=20)
    category_id = Identifier(required=True)
    marketplace = String(max_length=20)
    marketplace_id = String(max_length=100)
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    stock = Integer(default=0, min_value=0)


def ensure_category_exists(category_id):
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Category {category_id} does not exist"]}) from None


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        ensure_category_exists(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            brand=command.brand,
            image_url=command.image_url,
            price=command.price,
            original_price=command.original_price,
            condition=command.condition,
            category_id=command.category_id,
            marketplace=command.marketplace,
            marketplace_id=command.marketplace_id,
            rating=command.rating,
            review_count=command.review_count,
            stock=command.stock,
        )
        record = InventoryRecord.create(product_id=product.id, quantity=product.stock)

        current_domain.repository_for(Product).add(product)
        current_domain.repository_for(InventoryRecord).add(record)
        return str(product.id)
