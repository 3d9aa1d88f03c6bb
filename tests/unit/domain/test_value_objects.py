"""Tests for domain value objects."""

from decimal import Decimal
from uuid import UUID

import pytest

from ecommerce.domain.exceptions import InvalidEmailError
from ecommerce.domain.value_objects import CustomerId, Email, Money, OrderId, ProductId


class TestEmail:
    """Email construction and immutability."""

    def test_valid_email(self):
        email = Email("buyer@example.com")
        assert email.address == "buyer@example.com"
        assert str(email) == "buyer@example.com"

    @pytest.mark.parametrize("address", ["", "buyer.example.com", None])
    def test_invalid_email_rejected_at_construction(self, address):
        with pytest.raises(InvalidEmailError):
            Email(address)

    def test_invalid_email_is_value_error(self):
        """Callers catching ValueError still see malformed emails."""
        with pytest.raises(ValueError):
            Email("nope")

    def test_email_is_immutable(self):
        email = Email("a@b.c")
        with pytest.raises(AttributeError):
            email.address = "other@b.c"

    def test_equality_by_value(self):
        assert Email("a@b.c") == Email("a@b.c")


class TestMoney:
    """Money holds amount + currency."""

    def test_amount_coerced_to_decimal_without_float_noise(self):
        money = Money(amount="9.99", currency="USD")
        assert money.amount == Decimal("9.99")
        assert isinstance(money.amount, Decimal)

    def test_default_currency(self):
        assert Money(Decimal("1.00")).currency == "USD"

    def test_equality_by_value(self):
        assert Money(Decimal("3.50"), "USD") == Money(Decimal("3.50"), "USD")
        assert Money(Decimal("3.50"), "USD") != Money(Decimal("3.50"), "EUR")

    def test_str(self):
        assert str(Money(Decimal("3.50"), "USD")) == "3.50 USD"


class TestIdentifiers:
    """OrderId / CustomerId / ProductId."""

    def test_generate_is_unique(self):
        assert OrderId.generate() != OrderId.generate()

    def test_equality_by_value(self):
        raw = UUID("12345678-1234-5678-1234-567812345678")
        assert ProductId(raw) == ProductId(raw)
        assert hash(ProductId(raw)) == hash(ProductId(raw))

    def test_different_id_types_are_not_equal(self):
        raw = UUID("12345678-1234-5678-1234-567812345678")
        assert OrderId(raw) != CustomerId(raw)

    def test_from_string_round_trip(self):
        customer_id = CustomerId.generate()
        assert CustomerId.from_string(str(customer_id)) == customer_id

    def test_from_string_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid OrderId"):
            OrderId.from_string("not-a-uuid")
