"""Storefront Configuration"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    log_level: str = "INFO"

    # Pricing
    shipping_fee: float = Field(default=30.0, ge=0)
    currency: str = "USD"  # Display only, no conversion

    # Shipment notice: per-group weight is the first unit's weight times the
    # group count. Disable to weigh each group by its own unit weight.
    use_first_item_weight: bool = True

    # Shipment notice: list groups in hash table order rather than cart order
    legacy_group_order: bool = True

    # Count quantities already in the cart when validating a new line
    strict_cart_stock: bool = False

    class Config:
        env_prefix = "STOREFRONT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
