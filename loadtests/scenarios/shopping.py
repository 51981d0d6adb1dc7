"""Registered shopper journey.

Register -> Login -> Browse -> Add to Cart (x2) -> View Cart -> Remove ->
Checkout -> Order History. Steps execute in order; each depends on the
previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_item_data, checkout_data, registration_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class ShopperJourney(SequentialTaskSet):
    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = registration_data()
        with self.client.post("/auth/register", json=payload, catch_response=True, name="POST /auth/register") as resp:
            if resp.status_code == 201:
                self.state.email = payload["email"]
                self.state.password = payload["password"]
                self.state.user_id = resp.json()["userId"]
            else:
                resp.failure(f"Registration failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/auth/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            products = resp.json().get("data", []) if resp.status_code == 200 else []
            if not products:
                resp.failure("Catalogue is empty; seed it before load testing")
                self.interrupt()
                return
            self.state.product_ids = [p["id"] for p in products]

    def _add_random_item(self):
        product_id = random.choice(self.state.product_ids)
        with self.client.post(
            "/cart/items",
            json=cart_item_data(product_id),
            headers=self.state.auth_headers,
            catch_response=True,
            name="POST /cart/items",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_product_ids.append(product_id)
            else:
                resp.failure(f"Add to cart failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def add_item_1(self):
        self._add_random_item()

    @task
    def add_item_2(self):
        self._add_random_item()

    @task
    def view_cart(self):
        self.client.get("/cart", headers=self.state.auth_headers, name="GET /cart")

    @task
    def remove_item(self):
        if len(self.state.cart_product_ids) < 2:
            return
        product_id = self.state.cart_product_ids.pop()
        if product_id in self.state.cart_product_ids:
            # Same product added twice; removing it would empty the cart
            self.state.cart_product_ids.append(product_id)
            return
        self.client.delete(
            f"/cart/items/{product_id}",
            headers=self.state.auth_headers,
            name="DELETE /cart/items/{productId}",
        )

    @task
    def checkout(self):
        if not self.state.cart_product_ids:
            self.interrupt()
            return
        with self.client.post(
            "/orders",
            json=checkout_data(),
            headers=self.state.auth_headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_numbers.append(resp.json()["data"]["orderNumber"])
                self.state.cart_product_ids.clear()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def order_history(self):
        with self.client.get("/orders", headers=self.state.auth_headers, catch_response=True, name="GET /orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"Order history failed: {resp.status_code} — {extract_error_detail(resp)}")
            elif len(resp.json()["data"]) != len(self.state.order_numbers):
                resp.failure("Order history does not match the orders placed")
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = [ShopperJourney]
