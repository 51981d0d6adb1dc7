"""Anonymous catalogue browsing.

Read-only traffic: product listings, category and featured filters, and
product detail pages.
"""

import random

from locust import HttpUser, TaskSet, between, task

from loadtests.data_generators import category_filter
from loadtests.helpers.response import extract_error_detail


class BrowseCatalogue(TaskSet):
    """A visitor who never signs in, leaving after a few page views."""

    def on_start(self):
        self.product_ids = []

    @task(4)
    def list_products(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code == 200:
                self.product_ids = [p["id"] for p in resp.json()["data"]]
            else:
                resp.failure(f"List products failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(2)
    def list_category(self):
        self.client.get(
            "/products",
            params={"category": category_filter()},
            name="GET /products?category",
        )

    @task(1)
    def list_featured(self):
        self.client.get("/products", params={"featured": "true"}, name="GET /products?featured")

    @task(3)
    def view_product(self):
        if not self.product_ids:
            return
        with self.client.get(
            f"/products/{random.choice(self.product_ids)}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Product detail failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def leave(self):
        self.interrupt()


class BrowsingUser(HttpUser):
    wait_time = between(0.5, 2.0)
    tasks = [BrowseCatalogue]
