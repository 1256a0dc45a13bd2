"""Default gateway implementations.

The payment and seat reservation services stand in for the external
providers: they check their arguments and record the call, nothing more.
"""

from decimal import Decimal
from uuid import uuid4

import structlog

from purchases.gateways.interfaces import (
    PaymentGateway,
    SeatReservationGateway,
    TransactionIdGenerator,
)

logger = structlog.get_logger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicketPaymentService(PaymentGateway):
    """Payment provider client."""

    def make_payment(self, account_id: int, amount: Decimal) -> None:
        if not _is_int(account_id) or account_id <= 0:
            raise TypeError("accountId must be a positive integer")
        if not isinstance(amount, (int, Decimal)) or isinstance(amount, bool) or amount < 0:
            raise TypeError("totalAmountToPay must be a non-negative number")

        logger.info("payment_taken", account_id=account_id, amount=str(amount))


class SeatReservationService(SeatReservationGateway):
    """Seat booking provider client."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        if not _is_int(account_id) or account_id <= 0:
            raise TypeError("accountId must be a positive integer")
        if not _is_int(seat_count) or seat_count < 0:
            raise TypeError("totalSeatsToAllocate must be a non-negative integer")

        logger.info("seats_reserved", account_id=account_id, seat_count=seat_count)


class UuidTransactionIdGenerator(TransactionIdGenerator):
    """Random UUID4 transaction IDs."""

    def new_id(self) -> str:
        return str(uuid4())
