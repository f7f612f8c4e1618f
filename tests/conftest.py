"""Pytest configuration for tests."""

import pytest

from storefront.core.output import BufferedSink
from storefront.database.products import ProductCatalog, REFERENCE_PRODUCTS
from storefront.models.cart import Cart
from storefront.models.customer import Customer
from storefront.services.checkout import CheckoutService
from storefront.services.shipping import ShippingService


@pytest.fixture
def catalog():
    """Fresh reference catalog: Cheese, Biscuits, TV, Scratch Card."""
    return ProductCatalog.from_records(REFERENCE_PRODUCTS)


@pytest.fixture
def cheese(catalog):
    return catalog.get_by_name("Cheese")


@pytest.fixture
def biscuits(catalog):
    return catalog.get_by_name("Biscuits")


@pytest.fixture
def tv(catalog):
    return catalog.get_by_name("TV")


@pytest.fixture
def scratch_card(catalog):
    return catalog.get_by_name("Scratch Card")


@pytest.fixture
def cart(catalog):
    """Empty cart in the default (non-strict) stock mode."""
    return Cart(catalog, strict_stock=False)


@pytest.fixture
def customer():
    return Customer(name="Nada", balance=50000)


@pytest.fixture
def sink():
    return BufferedSink()


@pytest.fixture
def checkout_service(catalog, sink):
    """Checkout with historical shipment weights and group order, and a 30.0 fee."""
    return CheckoutService(
        catalog,
        sink,
        shipping_service=ShippingService(sink, use_first_item_weight=True, legacy_group_order=True),
        shipping_fee=30.0,
    )
