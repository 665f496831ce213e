"""Last-unit contention.

An admin account (ADMIN_USERNAME / ADMIN_PASSWORD, created with
``python src/manage.py create-admin``) lists a product with a single unit;
many shoppers then race to check it out. Exactly one checkout per product
may succeed; every other attempt must be rejected with a 400, never oversold.
"""

import os

from locust import HttpUser, constant_pacing, events, task

from loadtests.data_generators import order_data, product_data, shopper_credentials
from loadtests.helpers.response import extract_error_detail

_race = {"product_id": None, "orders": 0, "rejections": 0}


def _admin_headers(client) -> dict:
    resp = client.post(
        "/api/login",
        json={"username": os.environ["ADMIN_USERNAME"], "password": os.environ["ADMIN_PASSWORD"]},
        name="[RACE] POST /api/login (admin)",
    )
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@events.test_stop.add_listener
def report_race(**_kwargs):
    print(f"[RACE] successful orders: {_race['orders']}, rejected checkouts: {_race['rejections']}")


class LastUnitRaceUser(HttpUser):
    wait_time = constant_pacing(0.5)

    def on_start(self):
        if _race["product_id"] is None:
            headers = _admin_headers(self.client)
            categories = self.client.get("/api/categories", name="[RACE] GET /api/categories").json()
            product = self.client.post(
                "/api/products",
                json=product_data(categories[0]["id"], stock=1),
                headers=headers,
                name="[RACE] POST /api/products",
            ).json()
            _race["product_id"] = product["id"]

        token = self.client.post("/api/register", json=shopper_credentials(), name="[RACE] POST /api/register").json()[
            "token"
        ]
        self.headers = {"Authorization": f"Bearer {token}"}

    @task
    def grab_last_unit(self):
        added = self.client.post(
            "/api/cart",
            json={"productId": _race["product_id"], "quantity": 1},
            headers=self.headers,
            name="[RACE] POST /api/cart",
        )
        if added.status_code != 201:
            return

        with self.client.post(
            "/api/orders",
            json=order_data("standard"),
            headers=self.headers,
            catch_response=True,
            name="[RACE] POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                _race["orders"] += 1
                if _race["orders"] > 1:
                    resp.failure("Last unit sold more than once")
            elif resp.status_code == 400:
                _race["rejections"] += 1
                resp.success()
                self.client.delete("/api/cart", headers=self.headers, name="[RACE] DELETE /api/cart")
            else:
                resp.failure(f"Unexpected checkout result: {extract_error_detail(resp)}")
