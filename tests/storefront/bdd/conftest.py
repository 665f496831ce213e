"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then

from storefront.cart.cart import ShoppingCart
from storefront.cart.items import AddToCart
from storefront.errors import InsufficientStockError
from storefront.identity.registration import register_user
from storefront.inventory.stocking import set_stock
from storefront.product.lookup import get_product_with_inventory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def products():
    """Product ids keyed by the name used in the scenario."""
    return {}


@pytest.fixture()
def outcome():
    """Container for the result or error of the last action."""
    return {"result": None, "exc": None}


def _cart(user_id):
    return current_domain.repository_for(ShoppingCart).for_user(user_id)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a shopper is signed in", target_fixture="shopper")
def shopper_signed_in():
    return register_user(username="bdd-shopper", password="bdd-shopper-pass")


@given(parsers.cfparse('product "{name}" priced {price:f} with {stock:d} in stock'))
def product_in_stock(make_product, products, name, price, stock):
    products[name] = make_product(name=name, price=price, stock=stock)


@given(parsers.cfparse('the shopper has {quantity:d} of "{name}" in the cart'))
def item_in_cart(shopper, products, quantity, name):
    current_domain.process(
        AddToCart(user_id=shopper, product_id=products[name], quantity=quantity),
        asynchronous=False,
    )


@given(parsers.cfparse('the stock of "{name}" is set to {quantity:d}'))
def stock_is_set(products, name, quantity):
    set_stock(products[name], quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('product "{name}" has {quantity:d} in stock'))
def product_has_stock(products, name, quantity):
    product, record = get_product_with_inventory(products[name])
    assert record.quantity == quantity
    assert product.stock == quantity


@then("the cart is empty")
def cart_is_empty(shopper):
    cart = _cart(shopper)
    assert cart is None or cart.is_empty


@then(parsers.cfparse('the cart still holds {quantity:d} of "{name}"'))
def cart_holds(shopper, products, quantity, name):
    assert _cart(shopper).item_for(products[name]).quantity == quantity


@then(parsers.cfparse('the request is rejected for insufficient stock of "{name}"'))
@then(parsers.cfparse('the checkout is rejected for insufficient stock of "{name}"'))
def rejected_for_stock(outcome, name):
    assert isinstance(outcome["exc"], InsufficientStockError)
    assert outcome["exc"].product_name == name
