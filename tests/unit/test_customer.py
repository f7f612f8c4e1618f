"""Tests for the customer model."""

from storefront.models.customer import Customer


class TestCustomer:
    def test_deduct_balance(self):
        customer = Customer(name="Nada", balance=500)
        customer.deduct_balance(480)
        assert customer.get_balance() == 20.0

    def test_deduct_has_no_lower_bound(self):
        """Should leave sufficiency checks to checkout."""
        customer = Customer(name="Nada", balance=10)
        customer.deduct_balance(30)
        assert customer.balance == -20.0
