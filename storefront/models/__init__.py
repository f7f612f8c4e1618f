# Storefront Models

from .product import (
    Product,
    ExpirableProduct,
    NonExpirableShippableProduct,
    NonShippableProduct,
    AnyProduct,
    ProductRecord,
    Shippable,
    build_product,
)
from .cart import Cart, CartItem
from .customer import Customer
from .checkout import (
    CheckoutResult,
    CheckoutStatus,
    Receipt,
    ReceiptLine,
    ShipmentLine,
    ShipmentSummary,
)

__all__ = [
    "Product",
    "ExpirableProduct",
    "NonExpirableShippableProduct",
    "NonShippableProduct",
    "AnyProduct",
    "ProductRecord",
    "Shippable",
    "build_product",
    "Cart",
    "CartItem",
    "Customer",
    "CheckoutResult",
    "CheckoutStatus",
    "Receipt",
    "ReceiptLine",
    "ShipmentLine",
    "ShipmentSummary",
]
