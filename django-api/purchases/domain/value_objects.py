"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Self

from purchases.domain.errors import (
    InvalidAccountError,
    InvalidTicketCountError,
    InvalidTicketTypeError,
)


def is_positive_int(value: Any) -> bool:
    # bool is an int subclass; True must not pass as 1.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class TicketType(Enum):
    """Kinds of ticket that can be purchased."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def parse(cls, value: Any) -> Self:
        """Return the member for a TicketType or its exact string name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidTicketTypeError(value)


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if not is_positive_int(self.value):
            raise InvalidAccountError(self.value)


@dataclass(frozen=True)
class TicketRequest:
    """A request for ``count`` tickets of a single type."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticket_type", TicketType.parse(self.ticket_type))
        if not is_positive_int(self.count):
            raise InvalidTicketCountError(self.count)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
