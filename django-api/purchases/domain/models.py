"""Domain models produced while handling a purchase.

These are pure domain objects. Nothing here is persisted.
"""

from dataclasses import dataclass
from decimal import Decimal

from purchases.domain.value_objects import Money, TicketType


@dataclass(frozen=True)
class TicketCounts:
    """Number of tickets per type, summed across a batch."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    def __post_init__(self) -> None:
        if min(self.adult, self.child, self.infant) < 0:
            raise ValueError("Ticket counts cannot be negative")

    def count_of(self, ticket_type: TicketType) -> int:
        return getattr(self, ticket_type.value.lower())

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant


@dataclass(frozen=True)
class PriceQuote:
    """What a batch of tickets costs and how many seats it takes."""

    total_cost: Money
    total_seats: int


@dataclass(frozen=True)
class PurchaseOutcome:
    """Result of a completed purchase."""

    transaction_id: str
    success: bool
    total_cost: Decimal
    total_seats: int
    account_id: int
