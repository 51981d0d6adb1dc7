"""Mixed workload scenario.

Combines anonymous browsing with full shopper journeys in proportions that
model ordinary storefront traffic. This is the recommended scenario for
load baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.browsing import BrowseCatalogue
from loadtests.scenarios.shopping import ShopperJourney


class MixedWorkloadUser(HttpUser):
    """Mostly browsing, with roughly one in four sessions ending in a checkout."""

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogue: 3,
        ShopperJourney: 1,
    }
