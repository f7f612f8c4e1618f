"""
Storefront

In-memory retail checkout: product catalog, shopping cart, shipment notice
and receipt.
"""

__version__ = "1.0.0"
