"""In-memory product catalog"""

import logging
from typing import Iterable, Optional

from ..models.product import Product, ProductRecord, build_product

logger = logging.getLogger(__name__)

# Reference catalog
REFERENCE_PRODUCTS: list[ProductRecord] = [
    ProductRecord(name="Cheese", price=100, quantity=5, expired=False, weight=200),
    ProductRecord(name="Biscuits", price=150, quantity=3, expired=False, weight=700),
    ProductRecord(name="TV", price=300, quantity=5, weight=10000),
    ProductRecord(name="Scratch Card", price=50, quantity=10),
]


class ProductCatalog:
    """
    Owner of every product instance.

    Carts refer to products by the ``product_id`` handle the catalog
    assigns, so stock changes made here are seen by every cart line.
    """

    def __init__(self):
        self.products: dict[str, Product] = {}

    @classmethod
    def from_records(cls, records: Iterable[ProductRecord]) -> "ProductCatalog":
        """Build a catalog from raw records, preserving their order"""
        catalog = cls()
        for record in records:
            catalog.add_product(build_product(record))
        return catalog

    def add_product(self, product: Product) -> str:
        """
        Register a product and assign its handle.

        Returns:
            The product_id handle
        """
        if product.product_id is not None:
            raise ValueError(f"{product.name} is already registered as {product.product_id}")

        product_id = f"prod-{len(self.products) + 1:03d}"
        product.product_id = product_id
        self.products[product_id] = product
        logger.debug(f"Registered {product.name} as {product_id}")
        return product_id

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_by_name(self, name: str) -> Optional[Product]:
        """Get the first product with the given name"""
        return next((p for p in self.products.values() if p.name == name), None)

    def get_all_products(self) -> list[Product]:
        """Get all products in registration order"""
        return list(self.products.values())

    def contains(self, product: Product) -> bool:
        """Check that this exact product instance is owned by the catalog"""
        if product.product_id is None:
            return False
        return self.products.get(product.product_id) is product

    def reduce_stock(self, product_id: str, amount: int) -> None:
        """
        Remove units from a product's stock.

        Args:
            product_id: Product to update
            amount: Units to remove; not checked against current stock
        """
        product = self.products[product_id]
        product.reduce_quantity(amount)
        if product.quantity < 0:
            logger.warning(f"Stock for {product.name} dropped below zero: {product.quantity}")
