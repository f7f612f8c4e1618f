"""Exceptions raised while building a cart."""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""


class CartError(StorefrontError):
    """Raised when a product cannot be added to a cart."""

    def __init__(self, product_name: str, message: str) -> None:
        super().__init__(message)
        self.product_name = product_name


class InsufficientStock(CartError):
    """Raised when the requested quantity exceeds the available stock."""

    def __init__(self, product_name: str, available: int, requested: int) -> None:
        super().__init__(product_name, f"Insufficient stock for {product_name}")
        self.available = available
        self.requested = requested


class ExpiredProduct(CartError):
    """Raised when the product is expired."""

    def __init__(self, product_name: str) -> None:
        super().__init__(product_name, f"{product_name} is expired.")


class InvalidQuantity(CartError):
    """Raised when the requested quantity is not a positive integer."""

    def __init__(self, product_name: str, requested: int) -> None:
        super().__init__(
            product_name,
            f"Quantity for {product_name} must be at least 1, got {requested}",
        )
        self.requested = requested


class UnknownProduct(CartError):
    """Raised when the product is not registered in the cart's catalog."""

    def __init__(self, product_name: str) -> None:
        super().__init__(product_name, f"{product_name} is not in the catalog")
