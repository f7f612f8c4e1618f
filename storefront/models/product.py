"""Product models for the storefront catalog"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field, TypeAdapter, model_validator


@runtime_checkable
class Shippable(Protocol):
    """Capability of products that travel in a physical package"""

    name: str
    weight: float

    def get_weight(self) -> float:
        ...


class Product(BaseModel, ABC):
    """Product in the catalog"""

    product_id: Optional[str] = None  # Assigned by the catalog
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)

    class Config:
        from_attributes = True

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price

    def get_quantity(self) -> int:
        return self.quantity

    def reduce_quantity(self, amount: int) -> None:
        """
        Remove units from stock.

        The caller is responsible for checking that ``amount`` does not
        exceed the current quantity.
        """
        self.quantity -= amount

    @abstractmethod
    def is_expired(self) -> bool:
        ...

    @abstractmethod
    def requires_shipping(self) -> bool:
        ...


class ExpirableProduct(Product):
    """Perishable product that ships, e.g. cheese"""

    kind: Literal["expirable"] = "expirable"
    expired: bool = False
    weight: float = Field(gt=0)  # grams

    def is_expired(self) -> bool:
        return self.expired

    def requires_shipping(self) -> bool:
        return True

    def get_weight(self) -> float:
        return self.weight


class NonExpirableShippableProduct(Product):
    """Durable product that ships, e.g. a TV"""

    kind: Literal["shippable"] = "shippable"
    weight: float = Field(gt=0)  # grams

    def is_expired(self) -> bool:
        return False

    def requires_shipping(self) -> bool:
        return True

    def get_weight(self) -> float:
        return self.weight


class NonShippableProduct(Product):
    """Product delivered without a package, e.g. a scratch card"""

    kind: Literal["non_shippable"] = "non_shippable"

    def is_expired(self) -> bool:
        return False

    def requires_shipping(self) -> bool:
        return False


class ProductRecord(BaseModel):
    """Raw catalog entry used to construct a product"""

    name: str
    price: float
    quantity: int
    expired: Optional[bool] = None
    weight: Optional[float] = None  # grams

    @model_validator(mode="after")
    def check_expiry_needs_weight(self) -> "ProductRecord":
        if self.expired is not None and self.weight is None:
            raise ValueError("expirable products must carry a weight")
        return self


AnyProduct = Annotated[
    Union[ExpirableProduct, NonExpirableShippableProduct, NonShippableProduct],
    Field(discriminator="kind"),
]

product_adapter = TypeAdapter(AnyProduct)


def record_kind(record: ProductRecord) -> str:
    """Variant tag implied by the fields present in a record"""
    if record.weight is None:
        return "non_shippable"
    if record.expired is None:
        return "shippable"
    return "expirable"


def build_product(record: ProductRecord) -> Product:
    """Build the product variant matching the fields present in a record"""
    data = record.model_dump(exclude_none=True)
    data["kind"] = record_kind(record)
    return product_adapter.validate_python(data)
