"""Customer model"""

from pydantic import BaseModel


class Customer(BaseModel):
    """Shopper paying from a prepaid balance"""
    name: str
    balance: float

    def get_balance(self) -> float:
        return self.balance

    def deduct_balance(self, amount: float) -> None:
        """Subtract from the balance. Sufficiency is checked by checkout."""
        self.balance -= amount
