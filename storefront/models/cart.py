"""Cart models for the storefront"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from pydantic import BaseModel, Field

from ..core.config import settings
from ..core.exceptions import ExpiredProduct, InsufficientStock, InvalidQuantity, UnknownProduct
from .product import Product, Shippable

if TYPE_CHECKING:
    from ..database.products import ProductCatalog

logger = logging.getLogger(__name__)


class CartItem(BaseModel):
    """Item in a shopping cart"""
    product_id: str
    quantity: int = Field(gt=0)


class Cart:
    """
    Shopping cart.

    Lines keep insertion order and are never merged: adding the same product
    twice produces two lines. Each ``add`` is checked against the product's
    live stock only, so by default two lines for one product may together
    request more than is available. Pass ``strict_stock=True`` to count the
    quantity already in the cart as well.
    """

    def __init__(self, catalog: "ProductCatalog", strict_stock: Optional[bool] = None):
        self.catalog = catalog
        self.strict_stock = settings.strict_cart_stock if strict_stock is None else strict_stock
        self.items: list[CartItem] = []

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """
        Add a line to the cart.

        Raises:
            InvalidQuantity: quantity is below 1
            UnknownProduct: product is not owned by the cart's catalog
            InsufficientStock: quantity exceeds the product's stock
            ExpiredProduct: product is expired
        """
        if quantity < 1:
            raise InvalidQuantity(product.name, quantity)

        if not self.catalog.contains(product):
            raise UnknownProduct(product.name)

        requested = quantity
        if self.strict_stock:
            requested += self.quantity_of(product.product_id)

        if product.quantity < requested:
            logger.warning(
                f"Rejected {quantity}x {product.name}: "
                f"requested {requested}, available {product.quantity}"
            )
            raise InsufficientStock(product.name, product.quantity, requested)

        if product.is_expired():
            logger.warning(f"Rejected {product.name}: expired")
            raise ExpiredProduct(product.name)

        item = CartItem(product_id=product.product_id, quantity=quantity)
        self.items.append(item)
        return item

    def get_items(self) -> tuple[CartItem, ...]:
        return tuple(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def product_for(self, item: CartItem) -> Product:
        return self.catalog.products[item.product_id]

    def quantity_of(self, product_id: str) -> int:
        """Total quantity already requested for a product across all lines"""
        return sum(item.quantity for item in self.items if item.product_id == product_id)

    def line_total(self, item: CartItem) -> float:
        """Line price at the product's current price"""
        return self.product_for(item).price * item.quantity

    def get_subtotal(self) -> float:
        return sum(self.line_total(item) for item in self.items)

    def get_shippable_items(self) -> Iterator[Shippable]:
        """Yield one reference per physical unit that needs shipping"""
        for item in self.items:
            product = self.product_for(item)
            if product.requires_shipping() and isinstance(product, Shippable):
                for _ in range(item.quantity):
                    yield product
