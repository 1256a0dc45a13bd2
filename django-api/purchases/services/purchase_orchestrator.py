"""Purchase orchestrator - the entry point for buying tickets.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration
- Return domain models or raise domain errors

Payment is taken before seats are reserved. A reservation failure after a
successful payment is logged and re-raised; the payment is not refunded.
"""

from collections.abc import Sequence

import structlog

from purchases.domain.errors import PurchaseRejectedError
from purchases.domain.models import PurchaseOutcome
from purchases.domain.value_objects import TicketRequest
from purchases.gateways.interfaces import (
    PaymentGateway,
    SeatReservationGateway,
    TransactionIdGenerator,
)
from purchases.gateways.thirdparty import (
    SeatReservationService,
    TicketPaymentService,
    UuidTransactionIdGenerator,
)
from purchases.services.pricing import PricingCalculator
from purchases.services.validator import PurchaseValidator

logger = structlog.get_logger(__name__)


class PurchaseOrchestrator:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway | None = None,
        seat_reservation_gateway: SeatReservationGateway | None = None,
        id_generator: TransactionIdGenerator | None = None,
        validator: PurchaseValidator | None = None,
        calculator: PricingCalculator | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway or TicketPaymentService()
        self._seat_reservation_gateway = seat_reservation_gateway or SeatReservationService()
        self._id_generator = id_generator or UuidTransactionIdGenerator()
        self._validator = validator or PurchaseValidator()
        self._calculator = calculator or PricingCalculator()

    def purchase(
        self, account_id: int, ticket_requests: Sequence[TicketRequest] | None
    ) -> PurchaseOutcome:
        """Validate, price, pay for and reserve a batch of tickets.

        Raises:
            PurchaseRejectedError: If the attempt breaks a purchase rule.
                The concrete subclass names the rule.
            Exception: Whatever the payment or reservation gateway raises,
                unchanged.
        """
        transaction_id = self._id_generator.new_id()
        log = logger.bind(transaction_id=transaction_id, account_id=account_id)

        try:
            counts = self._validator.validate(account_id, ticket_requests)
        except PurchaseRejectedError as exc:
            log.warning("purchase_rejected", code=exc.code.value, reason=exc.message)
            raise

        quote = self._calculator.price(counts)
        total_cost = quote.total_cost.amount

        self._payment_gateway.make_payment(account_id, total_cost)
        try:
            self._seat_reservation_gateway.reserve_seat(account_id, quote.total_seats)
        except Exception:
            log.error(
                "seat_reservation_failed_after_payment",
                total_cost=str(total_cost),
                total_seats=quote.total_seats,
            )
            raise

        log.info(
            "purchase_completed",
            total_cost=str(total_cost),
            total_seats=quote.total_seats,
        )
        return PurchaseOutcome(
            transaction_id=transaction_id,
            success=True,
            total_cost=total_cost,
            total_seats=quote.total_seats,
            account_id=account_id,
        )
