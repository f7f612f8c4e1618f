"""Checkout result models"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class CheckoutStatus(str, Enum):
    COMPLETED = "completed"
    EMPTY_CART = "empty_cart"
    INSUFFICIENT_BALANCE = "insufficient_balance"


class ShipmentLine(BaseModel):
    """One product group in a shipment notice"""
    name: str
    count: int = Field(gt=0)
    weight: float  # grams, as reported on the notice


class ShipmentSummary(BaseModel):
    """Shippable units grouped by product name"""
    lines: list[ShipmentLine]
    total_weight_grams: float

    @property
    def total_weight_kg(self) -> float:
        return self.total_weight_grams / 1000


class ReceiptLine(BaseModel):
    """Item on a checkout receipt"""
    name: str
    quantity: int
    total_price: float


class Receipt(BaseModel):
    """Completed checkout receipt"""
    lines: list[ReceiptLine]
    subtotal: float
    shipping: float
    total: float
    remaining_balance: float


class CheckoutResult(BaseModel):
    """Outcome of one checkout transaction"""
    status: CheckoutStatus
    receipt: Optional[Receipt] = None
    shipment: Optional[ShipmentSummary] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == CheckoutStatus.COMPLETED
