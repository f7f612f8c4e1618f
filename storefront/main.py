"""
Storefront

Runs the reference checkout: two cheeses, a packet of biscuits and a
scratch card, paid from a 50000 balance, reported to the console.

Usage:
    storefront
    python -m storefront.main
"""

import logging

from dotenv import find_dotenv, load_dotenv

# Load environment variables before settings are built
load_dotenv(find_dotenv(usecwd=True))

from .core.config import get_settings  # noqa: E402
from .core.exceptions import CartError  # noqa: E402
from .core.output import ConsoleSink  # noqa: E402
from .database.products import ProductCatalog, REFERENCE_PRODUCTS  # noqa: E402
from .models.cart import Cart  # noqa: E402
from .models.customer import Customer  # noqa: E402
from .services.checkout import CheckoutService  # noqa: E402

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info(f"{settings.app_name} starting up...")

    catalog = ProductCatalog.from_records(REFERENCE_PRODUCTS)
    customer = Customer(name="Nada", balance=50000)
    cart = Cart(catalog)

    try:
        cart.add(catalog.get_by_name("Cheese"), 2)
        cart.add(catalog.get_by_name("Biscuits"), 1)
        cart.add(catalog.get_by_name("Scratch Card"), 1)
    except CartError as e:
        logger.error(f"Could not build cart: {e}")
        return 1

    checkout_service = CheckoutService(catalog, ConsoleSink())
    result = checkout_service.checkout(customer, cart)
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
