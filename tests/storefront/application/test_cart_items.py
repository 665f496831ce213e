"""Application tests for cart item commands."""

import pytest
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.cart.items import ClearCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.errors import InsufficientStockError, NotFoundError


def _cart(user_id):
    return current_domain.repository_for(ShoppingCart).for_user(user_id)


class TestAddToCart:
    def test_creates_cart_lazily(self, shopper_id, make_product, add_to_cart):
        assert _cart(shopper_id) is None
        product_id = make_product()
        add_to_cart(product_id, 2)
        assert _cart(shopper_id).item_for(product_id).quantity == 2

    def test_repeat_add_grows_line(self, shopper_id, make_product, add_to_cart):
        product_id = make_product()
        add_to_cart(product_id, 1)
        add_to_cart(product_id, 2)
        cart = _cart(shopper_id)
        assert len(cart.items) == 1
        assert cart.item_for(product_id).quantity == 3

    def test_unknown_product(self, add_to_cart):
        with pytest.raises(NotFoundError) as exc:
            add_to_cart("missing-product", 1)
        assert exc.value.message == "Product not found"

    def test_quantity_above_stock_rejected(self, shopper_id, make_product, add_to_cart):
        product_id = make_product(stock=2)
        with pytest.raises(InsufficientStockError) as exc:
            add_to_cart(product_id, 3)
        assert exc.value.available == 2
        assert _cart(shopper_id) is None

    def test_carts_are_per_user(self, shopper_id, make_product, add_to_cart):
        product_id = make_product()
        add_to_cart(product_id, 1)
        add_to_cart(product_id, 1, user_id="another-user")
        assert _cart(shopper_id).item_for(product_id).quantity == 1
        assert _cart("another-user").item_for(product_id).quantity == 1


class TestUpdateQuantity:
    def test_replaces_quantity(self, shopper_id, make_product, add_to_cart):
        product_id = make_product()
        add_to_cart(product_id, 1)
        current_domain.process(
            UpdateCartItemQuantity(user_id=shopper_id, product_id=product_id, quantity=4),
            asynchronous=False,
        )
        assert _cart(shopper_id).item_for(product_id).quantity == 4

    def test_above_stock_rejected(self, shopper_id, make_product, add_to_cart):
        product_id = make_product(stock=5)
        add_to_cart(product_id, 1)
        with pytest.raises(InsufficientStockError):
            current_domain.process(
                UpdateCartItemQuantity(user_id=shopper_id, product_id=product_id, quantity=6),
                asynchronous=False,
            )
        assert _cart(shopper_id).item_for(product_id).quantity == 1

    def test_item_not_in_cart(self, shopper_id, make_product):
        product_id = make_product()
        with pytest.raises(NotFoundError):
            current_domain.process(
                UpdateCartItemQuantity(user_id=shopper_id, product_id=product_id, quantity=1),
                asynchronous=False,
            )


class TestRemoveAndClear:
    def test_remove_item(self, shopper_id, make_product, add_to_cart):
        first = make_product(name="First")
        second = make_product(name="Second")
        add_to_cart(first, 1)
        add_to_cart(second, 1)

        current_domain.process(RemoveFromCart(user_id=shopper_id, product_id=first), asynchronous=False)

        cart = _cart(shopper_id)
        assert cart.item_for(first) is None
        assert cart.item_for(second) is not None

    def test_remove_missing_item(self, shopper_id):
        with pytest.raises(NotFoundError):
            current_domain.process(RemoveFromCart(user_id=shopper_id, product_id="nothing"), asynchronous=False)

    def test_clear_is_idempotent(self, shopper_id, make_product, add_to_cart):
        add_to_cart(make_product(), 2)

        current_domain.process(ClearCart(user_id=shopper_id), asynchronous=False)
        current_domain.process(ClearCart(user_id=shopper_id), asynchronous=False)

        assert _cart(shopper_id).is_empty

    def test_clear_without_cart(self, shopper_id):
        current_domain.process(ClearCart(user_id=shopper_id), asynchronous=False)
        assert _cart(shopper_id) is None
