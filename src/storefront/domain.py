"""Domain initialization and configuration.

A single protean Domain hosts every aggregate of the storefront: users,
products, carts and orders. Each aggregate package sits directly under this
module so `init()` discovers its elements. Keeping them in one domain means a
checkout reads the catalogue and writes the order and the cart inside the same
Unit of Work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
