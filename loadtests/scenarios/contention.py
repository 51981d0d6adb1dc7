"""Checkout contention for a single account.

Every simulated user signs in as the same shopper and races cart mutations
against checkouts. Expected outcomes are 200/201, 400 "Cart is empty" when
another checkout won, and 409 when the per-user cart lock times out. Any
other status is a failure.
"""

import random

from locust import HttpUser, constant_pacing, events, task

from loadtests.data_generators import cart_item_data, checkout_data, registration_data
from loadtests.helpers.response import extract_error_detail

_shared = {"token": None, "product_ids": []}


@events.test_start.add_listener
def _create_shared_shopper(environment, **_kwargs):
    import requests

    if environment.host is None:
        return
    payload = registration_data()
    requests.post(f"{environment.host}/auth/register", json=payload, timeout=10)
    login = requests.post(
        f"{environment.host}/auth/login",
        json={"email": payload["email"], "password": payload["password"]},
        timeout=10,
    )
    _shared["token"] = login.json().get("token")
    products = requests.get(f"{environment.host}/products", timeout=10).json().get("data", [])
    _shared["product_ids"] = [p["id"] for p in products]


class CartContentionUser(HttpUser):
    wait_time = constant_pacing(0.2)

    @property
    def _headers(self):
        return {"Authorization": f"Bearer {_shared['token']}"}

    @task(3)
    def add_item(self):
        if not _shared["product_ids"]:
            return
        with self.client.post(
            "/cart/items",
            json=cart_item_data(random.choice(_shared["product_ids"])),
            headers=self._headers,
            catch_response=True,
            name="[CONTENTION] POST /cart/items",
        ) as resp:
            if resp.status_code in (200, 409):
                resp.success()
            else:
                resp.failure(f"{resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def checkout(self):
        with self.client.post(
            "/orders",
            json=checkout_data(),
            headers=self._headers,
            catch_response=True,
            name="[CONTENTION] POST /orders",
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()
            elif resp.status_code == 400 and resp.json().get("message") == "Cart is empty":
                resp.success()
            else:
                resp.failure(f"{resp.status_code} — {extract_error_detail(resp)}")
