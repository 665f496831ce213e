"""BDD tests for the shopping cart."""

from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, when

from storefront.cart.items import AddToCart, ClearCart
from storefront.errors import InsufficientStockError

scenarios("features/cart.feature")


@when(parsers.cfparse('the shopper adds {quantity:d} of "{name}" to the cart'))
def add_to_cart(shopper, products, outcome, quantity, name):
    try:
        current_domain.process(
            AddToCart(user_id=shopper, product_id=products[name], quantity=quantity),
            asynchronous=False,
        )
    except InsufficientStockError as exc:
        outcome["exc"] = exc


@when("the shopper clears the cart")
def clear_cart(shopper):
    current_domain.process(ClearCart(user_id=shopper), asynchronous=False)
