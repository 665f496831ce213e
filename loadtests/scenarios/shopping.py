"""Shopper journey: register, fill the cart, pay, check out, review orders.

Steps execute in order; each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import order_data, shopper_credentials
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class CheckoutJourney(SequentialTaskSet):
    """Register -> Browse -> Add to cart (x2) -> Payment intent -> Checkout -> Orders."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        credentials = shopper_credentials()
        with self.client.post(
            "/api/register",
            json=credentials,
            catch_response=True,
            name="POST /api/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.username = credentials["username"]
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Register failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            in_stock = [p["id"] for p in resp.json() if p["stock"] > 0] if resp.status_code == 200 else []
            if not in_stock:
                resp.failure("No products in stock to shop for")
                self.interrupt()
                return
            self.state.product_ids = random.sample(in_stock, k=min(2, len(in_stock)))

    @task
    def add_to_cart(self):
        for product_id in self.state.product_ids:
            with self.client.post(
                "/api/cart",
                json={"productId": product_id, "quantity": 1},
                headers=self.state.headers,
                catch_response=True,
                name="POST /api/cart",
            ) as resp:
                if resp.status_code == 201:
                    self.state.cart_lines += 1
                else:
                    resp.failure(f"Add to cart failed: {extract_error_detail(resp)}")

    @task
    def view_cart(self):
        self.client.get("/api/cart", headers=self.state.headers, name="GET /api/cart")

    @task
    def create_payment_intent(self):
        self.client.post(
            "/api/create-payment-intent",
            json={"amount": round(random.uniform(50.0, 500.0), 2)},
            headers=self.state.headers,
            name="POST /api/create-payment-intent",
        )

    @task
    def checkout(self):
        if not self.state.cart_lines:
            self.interrupt()
            return
        with self.client.post(
            "/api/orders",
            json=order_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
            elif resp.status_code == 400:
                # Stock sold out between add-to-cart and checkout
                resp.success()
            else:
                resp.failure(f"Checkout failed: {extract_error_detail(resp)}")

    @task
    def review_orders(self):
        self.client.get("/api/orders", headers=self.state.headers, name="GET /api/orders")
        if self.state.order_id:
            self.client.get(
                f"/api/orders/{self.state.order_id}",
                headers=self.state.headers,
                name="GET /api/orders/{id}",
            )

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1, 3)
    tasks = [CheckoutJourney]
