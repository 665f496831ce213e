"""FastAPI endpoints for the storefront."""

from fastapi import APIRouter, Depends, Query, Request, Response
from protean.utils.globals import current_domain

from storefront.api.auth import SESSION_COOKIE, current_user, require_admin, session_token
from storefront.api.schemas import (
    AddressSchema,
    AddToCartRequest,
    CartItemResponse,
    CategoryResponse,
    ChatbotRequest,
    ChatbotResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    InventoryDetails,
    InventoryResponse,
    LoginRequest,
    MarketplaceStatusResponse,
    OrderItemResponse,
    OrderResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PlaceOrderRequest,
    ProductDetailResponse,
    ProductResponse,
    RegisterRequest,
    SessionResponse,
    SetStockRequest,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
    UserResponse,
)
from storefront.assistant.chatbot import reply_to
from storefront.cart.cart import ShoppingCart
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.category.lookup import get_category, list_categories
from storefront.category.management import CreateCategory
from storefront.errors import NotFoundError
from storefront.identity.registration import register_user
from storefront.identity.sessions import login, logout
from storefront.identity.user import User
from storefront.inventory.inventory import InventoryRecord
from storefront.inventory.stocking import set_stock
from storefront.marketplace.status import marketplace_status
from storefront.order.lookup import get_order, list_orders
from storefront.order.order import Order
from storefront.order.placement import place_order
from storefront.order.status import UpdateOrderStatus
from storefront.payments.intents import create_payment_intent
from storefront.product.creation import CreateProduct
from storefront.product.details import update_product
from storefront.product.filtering import ProductFilters, list_products
from storefront.product.lookup import get_product, get_product_with_inventory
from storefront.product.product import Product
from storefront.product.removal import RemoveProduct

auth_router = APIRouter(prefix="/api", tags=["auth"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])
product_router = APIRouter(prefix="/api/products", tags=["products"])
inventory_router = APIRouter(prefix="/api/inventory", tags=["inventory"])
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])
misc_router = APIRouter(prefix="/api", tags=["misc"])


def _start_session(response: Response, user: User, token: str) -> SessionResponse:
    response.set_cookie(SESSION_COOKIE, token, httponly=True, samesite="lax")
    return SessionResponse(user=UserResponse.from_user(user), token=token)


def _product_or_none(product_id) -> ProductResponse | None:
    product = current_domain.repository_for(Product).find(product_id)
    return ProductResponse.from_product(product) if product else None


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        user_id=str(order.user_id),
        status=order.status,
        total=order.total,
        payment_method=order.payment_method,
        payment_id=order.payment_id,
        delivery_method=order.delivery_method,
        delivery_fee=order.delivery_fee,
        estimated_delivery_date=order.estimated_delivery_date,
        tracking_number=order.tracking_number,
        shipping_address=AddressSchema.from_address(order.shipping_address),
        billing_address=AddressSchema.from_address(order.billing_address),
        order_date=order.order_date,
        items=[
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                price=item.price,
                product=_product_or_none(item.product_id),
            )
            for item in order.items
        ],
    )


def _cart_items(user_id) -> list[CartItemResponse]:
    cart = current_domain.repository_for(ShoppingCart).for_user(user_id)
    if cart is None:
        return []
    return [
        CartItemResponse(
            id=str(item.id),
            product_id=str(item.product_id),
            quantity=item.quantity,
            added_at=item.added_at,
            product=_product_or_none(item.product_id),
        )
        for item in cart.items
    ]


def _cart_item(user_id, product_id) -> CartItemResponse:
    for item in _cart_items(user_id):
        if item.product_id == str(product_id):
            return item
    raise NotFoundError("Item not found in cart")


# --- Auth endpoints ---


@auth_router.post("/register", status_code=201, response_model=SessionResponse)
async def register(body: RegisterRequest, response: Response) -> SessionResponse:
    register_user(username=body.username, password=body.password)
    user, token = login(body.username, body.password)
    return _start_session(response, user, token)


@auth_router.post("/login", response_model=SessionResponse)
async def login_user(body: LoginRequest, response: Response) -> SessionResponse:
    user, token = login(body.username, body.password)
    return _start_session(response, user, token)


@auth_router.post("/logout", status_code=204)
async def logout_user(request: Request) -> Response:
    logout(session_token(request))
    response = Response(status_code=204)
    response.delete_cookie(SESSION_COOKIE)
    return response


@auth_router.get("/user", response_model=UserResponse)
async def whoami(user: User = Depends(current_user)) -> UserResponse:
    return UserResponse.from_user(user)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories()]


@category_router.get("/{id_or_slug}", response_model=CategoryResponse)
async def category(id_or_slug: str) -> CategoryResponse:
    return CategoryResponse.from_category(get_category(id_or_slug))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest, _: User = Depends(require_admin)) -> CategoryResponse:
    category_id = current_domain.process(
        CreateCategory(name=body.name, slug=body.slug, icon=body.icon),
        asynchronous=False,
    )
    return CategoryResponse.from_category(get_category(category_id))


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def products(
    category_id: str | None = Query(None, alias="categoryId"),
    condition: list[str] | None = Query(None),
    marketplace: list[str] | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    brand: list[str] | None = Query(None),
    search: str | None = Query(None),
) -> list[ProductResponse]:
    filters = ProductFilters.from_query(
        category_id=category_id,
        condition=condition,
        marketplace=marketplace,
        min_price=min_price,
        max_price=max_price,
        brand=brand,
        search=search,
    )
    return [ProductResponse.from_product(product) for product in list_products(filters)]


@product_router.get("/{product_id}", response_model=ProductDetailResponse)
async def product(product_id: str) -> ProductDetailResponse:
    found, record = get_product_with_inventory(product_id)
    details = (
        InventoryDetails(quantity=record.quantity, last_updated=record.last_updated)
        if record
        else InventoryDetails(quantity=0)
    )
    return ProductDetailResponse(**ProductResponse.from_product(found).model_dump(), inventory_details=details)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, _: User = Depends(require_admin)) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        brand=body.brand,
        image_url=body.image_url,
        price=body.price,
        original_price=body.original_price,
        condition=body.condition.value,
        category_id=body.category_id,
        marketplace=body.marketplace.value if body.marketplace else None,
        marketplace_id=body.marketplace_id,
        rating=body.rating,
        review_count=body.review_count,
        stock=body.stock,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(get_product(product_id))


@product_router.patch("/{product_id}", response_model=ProductResponse)
async def patch_product(
    product_id: str, body: UpdateProductRequest, _: User = Depends(require_admin)
) -> ProductResponse:
    get_product(product_id)
    update_product(product_id, body.detail_changes(), stock=body.stock)
    return ProductResponse.from_product(get_product(product_id))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, _: User = Depends(require_admin)) -> Response:
    get_product(product_id)
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# --- Inventory endpoints ---


@inventory_router.get("/{product_id}", response_model=InventoryResponse)
async def inventory(product_id: str) -> InventoryResponse:
    record = current_domain.repository_for(InventoryRecord).for_product(product_id)
    if record is None:
        raise NotFoundError("Inventory not found")
    return InventoryResponse.from_record(record)


@inventory_router.patch("/{product_id}", response_model=InventoryResponse)
async def patch_inventory(
    product_id: str, body: SetStockRequest, _: User = Depends(require_admin)
) -> InventoryResponse:
    get_product(product_id)
    set_stock(product_id, body.quantity)
    record = current_domain.repository_for(InventoryRecord).for_product(product_id)
    return InventoryResponse.from_record(record)


# --- Cart endpoints ---


@cart_router.get("", response_model=list[CartItemResponse])
async def cart(user: User = Depends(current_user)) -> list[CartItemResponse]:
    return _cart_items(user.id)


@cart_router.post("", status_code=201, response_model=CartItemResponse)
async def add_to_cart(body: AddToCartRequest, user: User = Depends(current_user)) -> CartItemResponse:
    current_domain.process(
        AddToCart(user_id=user.id, product_id=body.product_id, quantity=body.quantity),
        asynchronous=False,
    )
    return _cart_item(user.id, body.product_id)


@cart_router.patch("/{product_id}", response_model=CartItemResponse)
async def update_cart_item(
    product_id: str, body: UpdateCartItemRequest, user: User = Depends(current_user)
) -> CartItemResponse:
    current_domain.process(
        UpdateCartItemQuantity(user_id=user.id, product_id=product_id, quantity=body.quantity),
        asynchronous=False,
    )
    return _cart_item(user.id, product_id)


@cart_router.delete("/{product_id}", status_code=204)
async def remove_cart_item(product_id: str, user: User = Depends(current_user)) -> Response:
    current_domain.process(RemoveFromCart(user_id=user.id, product_id=product_id), asynchronous=False)
    return Response(status_code=204)


@cart_router.delete("", status_code=204)
async def clear_cart(user: User = Depends(current_user)) -> Response:
    current_domain.process(ClearCart(user_id=user.id), asynchronous=False)
    return Response(status_code=204)


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: PlaceOrderRequest, user: User = Depends(current_user)) -> OrderResponse:
    order_id = place_order(
        user_id=user.id,
        payment_method=body.payment_method.value,
        payment_id=body.payment_id,
        delivery_method=body.delivery_method.value,
        delivery_fee=body.delivery_fee,
        shipping_address=body.shipping_address.model_dump(),
        billing_address=body.billing_address.model_dump(),
    )
    return _order_response(get_order(order_id, user.id, is_admin=user.is_admin))


@order_router.get("", response_model=list[OrderResponse])
async def orders(user: User = Depends(current_user)) -> list[OrderResponse]:
    return [_order_response(order) for order in list_orders(user.id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order(order_id: str, user: User = Depends(current_user)) -> OrderResponse:
    return _order_response(get_order(order_id, user.id, is_admin=user.is_admin))


@order_router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, admin: User = Depends(require_admin)
) -> OrderResponse:
    current_domain.process(
        UpdateOrderStatus(
            order_id=order_id,
            status=body.status.value,
            tracking_number=body.tracking_number,
            estimated_delivery_date=body.estimated_delivery_date,
        ),
        asynchronous=False,
    )
    return _order_response(get_order(order_id, admin.id, is_admin=True))


# --- Payments, assistant and marketplace endpoints ---


@misc_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def payment_intent(body: PaymentIntentRequest, _: User = Depends(current_user)) -> PaymentIntentResponse:
    return PaymentIntentResponse(client_secret=create_payment_intent(body.amount))


@misc_router.post("/chatbot/message", response_model=ChatbotResponse)
async def chatbot_message(body: ChatbotRequest) -> ChatbotResponse:
    return ChatbotResponse(response=reply_to(body.message))


@misc_router.get("/marketplace/{marketplace}/status", response_model=MarketplaceStatusResponse)
async def marketplace(marketplace: str) -> MarketplaceStatusResponse:
    return MarketplaceStatusResponse(**marketplace_status(marketplace))
