"""Listings and line collections past the provider's default page size."""

from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.category.lookup import list_categories
from storefront.order.lookup import list_orders
from storefront.order.order import Order
from storefront.order.placement import place_order
from storefront.product.filtering import ProductFilters, list_products
from storefront.product.lookup import get_product_with_inventory


class TestCatalogueListings:
    def test_lists_every_product(self, make_product):
        for n in range(120):
            make_product(name=f"Filler {n}")

        assert len(list_products(ProductFilters())) == 120

    def test_search_reaches_products_added_last(self, make_product):
        for n in range(110):
            make_product(name=f"Filler {n}")
        needle = make_product(name="Needle phone")

        found = list_products(ProductFilters.from_query(search="needle"))

        assert [str(product.id) for product in found] == [needle]

    def test_lists_every_category(self, make_category):
        for n in range(105):
            make_category(name=f"Category {n}", slug=f"category-{n}")

        assert len(list_categories()) == 105


class TestLargeCarts:
    def test_cart_keeps_every_line(self, shopper_id, make_product, add_to_cart):
        for n in range(105):
            add_to_cart(make_product(name=f"Item {n}"), 1)

        cart = current_domain.repository_for(ShoppingCart).for_user(shopper_id)
        assert len(cart.items) == 105

    def test_checkout_orders_every_line(self, shopper_id, make_product, add_to_cart, address):
        product_ids = [make_product(name=f"Item {n}", stock=3) for n in range(105)]
        for product_id in product_ids:
            add_to_cart(product_id, 1)

        order_id = place_order(
            user_id=shopper_id,
            payment_method="credit_card",
            delivery_method="standard",
            delivery_fee=0.0,
            shipping_address=address,
            billing_address=address,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert len(order.items) == 105
        assert order.total == 1050.0
        assert current_domain.repository_for(ShoppingCart).for_user(shopper_id).is_empty
        assert get_product_with_inventory(product_ids[-1])[1].quantity == 2


class TestOrderHistory:
    def test_lists_every_order(self, shopper_id, address):
        repo = current_domain.repository_for(Order)
        for n in range(102):
            repo.add(
                Order.create(
                    user_id=shopper_id,
                    lines=[{"product_id": f"product-{n}", "quantity": 1, "price": 10.0}],
                    payment_method="credit_card",
                    delivery_method="standard",
                    delivery_fee=0.0,
                    shipping_address=address,
                    billing_address=address,
                )
            )

        assert len(list_orders(shopper_id)) == 102
