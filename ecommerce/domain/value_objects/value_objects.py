"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import InvalidEmailError


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Holds the amount/currency pair only. Currency consistency across
    several Money values (e.g. the lines of one order) is not checked here.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Email:
    """Customer email address. Must contain an '@'."""

    address: str

    def __post_init__(self):
        if not isinstance(self.address, str) or "@" not in self.address:
            raise InvalidEmailError(self.address)

    def __str__(self) -> str:
        return self.address
