"""Aggregate identifiers (128-bit random UUIDs, compared by value)."""
from dataclasses import dataclass
from typing import TypeVar, Type
from uuid import UUID, uuid4


_IdT = TypeVar("_IdT", bound="_Identifier")


@dataclass(frozen=True)
class _Identifier:
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            object.__setattr__(self, 'value', UUID(str(self.value)))

    @classmethod
    def generate(cls: Type[_IdT]) -> _IdT:
        """Generate a new random identifier."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls: Type[_IdT], raw: str) -> _IdT:
        """
        Parse a caller-supplied identifier.

        Raises:
            ValueError: If raw is not a valid UUID string
        """
        try:
            return cls(value=UUID(str(raw)))
        except (TypeError, ValueError, AttributeError):
            raise ValueError(f"Invalid {cls.__name__}: {raw!r}") from None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId(_Identifier):
    """Order aggregate identifier."""


@dataclass(frozen=True)
class CustomerId(_Identifier):
    """Customer aggregate identifier."""


@dataclass(frozen=True)
class ProductId(_Identifier):
    """Product aggregate identifier."""
