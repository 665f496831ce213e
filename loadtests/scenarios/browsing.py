"""Anonymous catalogue browsing.

Read-only traffic: category listing, filtered product searches, product
detail pages and the shopping assistant.
"""

import random

from locust import HttpUser, between, task

from loadtests.data_generators import chatbot_message, product_filters


class CatalogueBrowser(HttpUser):
    wait_time = between(1, 3)

    def on_start(self):
        self.product_ids: list[str] = []
        self.category_ids: list[str] = []

    @task(2)
    def list_categories(self):
        with self.client.get("/api/categories", catch_response=True, name="GET /api/categories") as resp:
            if resp.status_code == 200:
                self.category_ids = [c["id"] for c in resp.json()]
            else:
                resp.failure(f"List categories failed: {resp.status_code}")

    @task(5)
    def search_products(self):
        params = product_filters()
        if self.category_ids and random.random() < 0.5:
            params["categoryId"] = random.choice(self.category_ids)
        with self.client.get("/api/products", params=params, catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                found = [p["id"] for p in resp.json()]
                if found:
                    self.product_ids = found[:50]
            else:
                resp.failure(f"Search failed: {resp.status_code}")

    @task(4)
    def view_product(self):
        if not self.product_ids:
            return
        self.client.get(
            f"/api/products/{random.choice(self.product_ids)}",
            name="GET /api/products/{id}",
        )

    @task(1)
    def ask_assistant(self):
        self.client.post(
            "/api/chatbot/message",
            json={"message": chatbot_message()},
            name="POST /api/chatbot/message",
        )
