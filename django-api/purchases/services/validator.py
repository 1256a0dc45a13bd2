"""Admissibility rules for a batch of ticket requests.

Checks run in a fixed order and the first violation is raised:
account, non-empty batch, entry format, adult presence, infant ratio,
ticket limit. Rules look at per-type totals, so splitting one order into
several same-type requests never changes the result.
"""

from collections import Counter
from collections.abc import Sequence

from purchases.domain.errors import (
    EmptyRequestError,
    InfantExceedsAdultError,
    InvalidTicketRequestError,
    MaxTicketsExceededError,
    NoAdultError,
)
from purchases.domain.models import TicketCounts
from purchases.domain.policy import MAX_INFANTS_PER_ADULT, MAX_TICKETS_PER_TRANSACTION
from purchases.domain.value_objects import AccountId, TicketRequest, TicketType


class PurchaseValidator:
    """Decides whether a purchase attempt may go ahead."""

    def validate(
        self, account_id: int, ticket_requests: Sequence[TicketRequest] | None
    ) -> TicketCounts:
        """Validate a purchase attempt and return its normalized counts.

        Raises:
            InvalidAccountError: If account_id is not a positive integer.
            EmptyRequestError: If no ticket requests were given.
            InvalidTicketRequestError: If an entry is not a TicketRequest.
            NoAdultError: If the batch has no adult ticket.
            InfantExceedsAdultError: If infants outnumber adults.
            MaxTicketsExceededError: If the batch is over the ticket limit.
        """
        self.validate_account(account_id)
        self.validate_not_empty(ticket_requests)
        counts = self.aggregate(ticket_requests)
        self.apply_rules(counts)
        return counts

    def validate_account(self, account_id: int) -> AccountId:
        return AccountId(account_id)

    def validate_not_empty(self, ticket_requests: Sequence[TicketRequest] | None) -> None:
        if not ticket_requests:
            raise EmptyRequestError()

    def aggregate(self, ticket_requests: Sequence[TicketRequest]) -> TicketCounts:
        """Sum ticket counts per type across the batch."""
        totals: Counter[TicketType] = Counter()
        for request in ticket_requests:
            if not isinstance(request, TicketRequest):
                raise InvalidTicketRequestError(request)
            totals[request.ticket_type] += request.count

        return TicketCounts(
            adult=totals[TicketType.ADULT],
            child=totals[TicketType.CHILD],
            infant=totals[TicketType.INFANT],
        )

    def apply_rules(self, counts: TicketCounts) -> None:
        self.check_adult_present(counts)
        self.check_infant_ratio(counts)
        self.check_max_tickets(counts)

    def check_adult_present(self, counts: TicketCounts) -> None:
        if counts.adult == 0:
            raise NoAdultError()

    def check_infant_ratio(self, counts: TicketCounts) -> None:
        if counts.infant > counts.adult * MAX_INFANTS_PER_ADULT:
            raise InfantExceedsAdultError(infants=counts.infant, adults=counts.adult)

    def check_max_tickets(self, counts: TicketCounts) -> None:
        if counts.total > MAX_TICKETS_PER_TRANSACTION:
            raise MaxTicketsExceededError(
                requested=counts.total, maximum=MAX_TICKETS_PER_TRANSACTION
            )
