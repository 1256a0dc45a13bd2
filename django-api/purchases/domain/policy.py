"""Fixed business rules for ticket purchases."""

from decimal import Decimal

from purchases.domain.value_objects import Money, TicketType

MAX_TICKETS_PER_TRANSACTION = 25

# Each infant sits on an adult's lap.
MAX_INFANTS_PER_ADULT = 1

TICKET_PRICES: dict[TicketType, Money] = {
    TicketType.ADULT: Money(Decimal("25")),
    TicketType.CHILD: Money(Decimal("15")),
    TicketType.INFANT: Money(Decimal("0")),
}

SEAT_REQUIRING_TYPES = frozenset({TicketType.ADULT, TicketType.CHILD})
