from purchases.domain.models import PriceQuote, PurchaseOutcome, TicketCounts
from purchases.domain.value_objects import AccountId, Money, TicketRequest, TicketType

__all__ = [
    "TicketType",
    "TicketRequest",
    "AccountId",
    "Money",
    "TicketCounts",
    "PriceQuote",
    "PurchaseOutcome",
]
