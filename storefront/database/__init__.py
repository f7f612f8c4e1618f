# Database modules

from .products import ProductCatalog, REFERENCE_PRODUCTS

__all__ = [
    "ProductCatalog",
    "REFERENCE_PRODUCTS",
]
