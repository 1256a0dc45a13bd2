"""Cost and seat arithmetic over normalized ticket counts."""

from decimal import Decimal

from purchases.domain.models import PriceQuote, TicketCounts
from purchases.domain.policy import SEAT_REQUIRING_TYPES, TICKET_PRICES
from purchases.domain.value_objects import Money, TicketType


class PricingCalculator:
    """Prices a validated batch. Pure; never raises for valid counts."""

    def price(self, counts: TicketCounts) -> PriceQuote:
        return PriceQuote(
            total_cost=self.total_cost(counts),
            total_seats=self.total_seats(counts),
        )

    def total_cost(self, counts: TicketCounts) -> Money:
        total = Money(Decimal("0"))
        for ticket_type in TicketType:
            total += TICKET_PRICES[ticket_type].times(counts.count_of(ticket_type))
        return total

    def total_seats(self, counts: TicketCounts) -> int:
        # Infants sit on a lap and take no seat.
        return sum(counts.count_of(ticket_type) for ticket_type in SEAT_REQUIRING_TYPES)
