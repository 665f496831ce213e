"""Pydantic request/response schemas for the storefront API.

Every schema speaks camelCase on the wire and accepts snake_case field names
in Python.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.order.order import DeliveryMethod, OrderStatus, PaymentMethod
from storefront.product.product import Marketplace, ProductCondition


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Identity ---


class RegisterRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"username": "jane", "password": "s3cret-pass"}]}}

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    id: str
    username: str
    is_admin: bool
    created_at: datetime | None = None

    @classmethod
    def from_user(cls, user) -> UserResponse:
        return cls(id=str(user.id), username=user.username, is_admin=bool(user.is_admin), created_at=user.created_at)


class SessionResponse(CamelModel):
    user: UserResponse
    token: str


# --- Catalogue ---


class CreateCategoryRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Cameras", "slug": "cameras", "icon": "fas fa-camera"}]}}

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100)
    icon: str | None = Field(None, max_length=100)


class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    icon: str | None = None

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(id=str(category.id), name=category.name, slug=category.slug, icon=category.icon)


class CreateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "ThinkPad X1 Carbon",
                    "description": "14-inch business ultrabook, 16GB RAM, 512GB SSD.",
                    "brand": "Lenovo",
                    "imageUrl": "https://example.com/x1.jpg",
                    "price": 899.0,
                    "originalPrice": 1299.0,
                    "condition": "refurbished",
                    "categoryId": "laptops-category-id",
                    "stock": 5,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1, max_length=100)
    image_url: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0)
    original_price: float | None = Field(None, ge=0)
    condition: ProductCondition
    category_id: str
    marketplace: Marketplace | None = None
    marketplace_id: str | None = Field(None, max_length=100)
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    stock: int = Field(0, ge=0)


class UpdateProductRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 849.0, "stock": 3}]}}

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    brand: str | None = Field(None, min_length=1, max_length=100)
    image_url: str | None = Field(None, min_length=1, max_length=500)
    price: float | None = Field(None, ge=0)
    original_price: float | None = Field(None, ge=0)
    condition: ProductCondition | None = None
    category_id: str | None = None
    marketplace: Marketplace | None = None
    marketplace_id: str | None = Field(None, max_length=100)
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)

    def detail_changes(self) -> dict:
        """Non-stock fields the client sent, explicit nulls included, with enums reduced to their values."""
        return self.model_dump(exclude_unset=True, exclude={"stock"}, mode="json")


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str
    brand: str
    image_url: str
    price: float
    original_price: float | None = None
    condition: str
    category_id: str
    marketplace: str | None = None
    marketplace_id: str | None = None
    rating: float = 0.0
    review_count: int = 0
    stock: int = 0

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            brand=product.brand,
            image_url=product.image_url,
            price=product.price,
            original_price=product.original_price,
            condition=product.condition,
            category_id=str(product.category_id),
            marketplace=product.marketplace,
            marketplace_id=product.marketplace_id,
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
            stock=product.stock or 0,
        )


class InventoryDetails(CamelModel):
    quantity: int
    last_updated: datetime | None = None


class ProductDetailResponse(ProductResponse):
    inventory_details: InventoryDetails


# --- Inventory ---


class SetStockRequest(CamelModel):
    quantity: int = Field(..., ge=0)


class InventoryResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    last_updated: datetime | None = None

    @classmethod
    def from_record(cls, record) -> InventoryResponse:
        return cls(
            id=str(record.id),
            product_id=str(record.product_id),
            quantity=record.quantity,
            last_updated=record.last_updated,
        )


# --- Cart ---


class AddToCartRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"productId": "product-id", "quantity": 2}]}}

    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(CamelModel):
    quantity: int = Field(..., ge=1)


class CartItemResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    added_at: datetime | None = None
    product: ProductResponse | None = None


# --- Orders ---


class AddressSchema(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=10, max_length=30)

    @classmethod
    def from_address(cls, address) -> AddressSchema:
        return cls(
            full_name=address.full_name,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            phone=address.phone,
        )


class PlaceOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "paymentMethod": "credit_card",
                    "paymentId": "pi_1700000000000_secret_ab12cd34",
                    "deliveryMethod": "standard",
                    "deliveryFee": 5.0,
                    "shippingAddress": {
                        "fullName": "Jane Doe",
                        "addressLine1": "1 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "postalCode": "62701",
                        "country": "US",
                        "phone": "5551234567",
                    },
                    "billingAddress": {
                        "fullName": "Jane Doe",
                        "addressLine1": "1 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "postalCode": "62701",
                        "country": "US",
                        "phone": "5551234567",
                    },
                }
            ]
        }
    }

    payment_method: PaymentMethod
    payment_id: str | None = Field(None, max_length=255)
    delivery_method: DeliveryMethod
    delivery_fee: float = Field(..., ge=0)
    shipping_address: AddressSchema
    billing_address: AddressSchema


class UpdateOrderStatusRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "shipped", "trackingNumber": "1Z999AA10123456784"}]}}

    status: OrderStatus
    tracking_number: str | None = Field(None, max_length=255)
    estimated_delivery_date: datetime | None = None


class OrderItemResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    price: float
    product: ProductResponse | None = None


class OrderResponse(CamelModel):
    id: str
    user_id: str
    status: str
    total: float
    payment_method: str
    payment_id: str | None = None
    delivery_method: str
    delivery_fee: float
    estimated_delivery_date: datetime | None = None
    tracking_number: str | None = None
    shipping_address: AddressSchema
    billing_address: AddressSchema
    order_date: datetime | None = None
    items: list[OrderItemResponse] = []


# --- Payments, assistant, marketplace ---


class PaymentIntentRequest(CamelModel):
    amount: float = Field(..., gt=0)


class PaymentIntentResponse(CamelModel):
    client_secret: str


class ChatbotRequest(CamelModel):
    message: str


class ChatbotResponse(CamelModel):
    response: str


class MarketplaceStatusResponse(CamelModel):
    marketplace: str
    connected: bool
    products_synced: int
    last_sync: datetime
    sync_status: str
