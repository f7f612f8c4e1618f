"""
Checkout Service

Runs one checkout transaction: validate, commit stock, ship, print the
receipt and settle the customer's balance.
"""

import logging
from typing import Optional

from ..core.config import settings
from ..core.output import OutputSink, format_amount
from ..database.products import ProductCatalog
from ..models.cart import Cart
from ..models.checkout import CheckoutResult, CheckoutStatus, Receipt, ReceiptLine
from ..models.customer import Customer
from .shipping import ShippingService

logger = logging.getLogger(__name__)

RECEIPT_SEPARATOR = "-" * 22


class CheckoutService:
    """
    Checkout for carts built against one catalog.

    Both rejections (empty cart, insufficient balance) happen before any
    state is touched. Once stock is committed the remaining steps cannot
    fail, so there is no rollback.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        sink: OutputSink,
        shipping_service: Optional[ShippingService] = None,
        shipping_fee: Optional[float] = None,
    ):
        self.catalog = catalog
        self.sink = sink
        self.shipping_service = shipping_service or ShippingService(sink)
        self.shipping_fee = settings.shipping_fee if shipping_fee is None else shipping_fee

    def checkout(self, customer: Customer, cart: Cart) -> CheckoutResult:
        """
        Process checkout.

        Returns:
            CheckoutResult; rejections are reported, not raised

        Raises:
            ValueError: cart was built against a different catalog
        """
        # Cart handles only resolve in the catalog that issued them
        if cart.catalog is not self.catalog:
            raise ValueError("Cart belongs to a different catalog than this checkout")

        if cart.is_empty():
            return self._reject(CheckoutStatus.EMPTY_CART, "Cart is empty")

        subtotal = cart.get_subtotal()
        shipping = self.shipping_fee
        total = subtotal + shipping

        logger.info(f"Checkout for {customer.name}: {len(cart.items)} lines, total {total}")

        if customer.get_balance() < total:
            return self._reject(CheckoutStatus.INSUFFICIENT_BALANCE, "Insufficient balance")

        # Commit stock
        for item in cart.get_items():
            self.catalog.reduce_stock(item.product_id, item.quantity)

        shipment = self.shipping_service.ship(cart.get_shippable_items())

        self.sink.write_line("** Checkout receipt **")
        lines = []
        for item in cart.get_items():
            line = ReceiptLine(
                name=cart.product_for(item).name,
                quantity=item.quantity,
                total_price=cart.line_total(item),
            )
            lines.append(line)
            self.sink.write_line(f"{line.quantity}x {line.name} {format_amount(line.total_price)}")
        self.sink.write_line(RECEIPT_SEPARATOR)
        self.sink.write_line(f"Subtotal {format_amount(subtotal)}")
        self.sink.write_line(f"Shipping {format_amount(shipping)}")
        self.sink.write_line(f"Amount {format_amount(total)}")

        customer.deduct_balance(total)
        self.sink.write_line(f"Remaining Balance {format_amount(customer.get_balance())}")

        logger.info(f"Checkout completed for {customer.name}: charged {total}")

        return CheckoutResult(
            status=CheckoutStatus.COMPLETED,
            receipt=Receipt(
                lines=lines,
                subtotal=subtotal,
                shipping=shipping,
                total=total,
                remaining_balance=customer.get_balance(),
            ),
            shipment=shipment,
        )

    def _reject(self, status: CheckoutStatus, message: str) -> CheckoutResult:
        self.sink.write_line(f"Error: {message}")
        logger.warning(f"Checkout rejected: {message}")
        return CheckoutResult(status=status, error_message=message)
