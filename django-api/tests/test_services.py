"""Unit tests for PurchaseOrchestrator.

These test sequencing, error propagation and the outcome record.
Run with: pytest tests/test_services.py -v
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest
from structlog.testing import capture_logs

from purchases.domain import PurchaseOutcome, TicketRequest, TicketType
from purchases.domain.errors import (
    EmptyRequestError,
    InfantExceedsAdultError,
    InvalidAccountError,
    MaxTicketsExceededError,
    NoAdultError,
)
from purchases.gateways import SeatReservationService, TicketPaymentService
from purchases.services import PurchaseOrchestrator

ADULT = TicketType.ADULT
CHILD = TicketType.CHILD
INFANT = TicketType.INFANT


class TestPurchase:
    """Tests for successful purchases."""

    def test_purchase_returns_outcome(self, orchestrator):
        """A valid purchase returns the priced outcome."""
        outcome = orchestrator.purchase(
            1234,
            [TicketRequest(ADULT, 2), TicketRequest(CHILD, 1), TicketRequest(INFANT, 1)],
        )

        assert outcome == PurchaseOutcome(
            transaction_id="txn-0001",
            success=True,
            total_cost=Decimal("65"),
            total_seats=3,
            account_id=1234,
        )

    def test_purchase_pays_and_reserves(
        self, orchestrator, payment_gateway, seat_reservation_gateway
    ):
        """Payment and reservation receive the account, cost and seats."""
        orchestrator.purchase(2, [TicketRequest(ADULT, 1), TicketRequest(CHILD, 1)])

        payment_gateway.make_payment.assert_called_once_with(2, Decimal("40"))
        seat_reservation_gateway.reserve_seat.assert_called_once_with(2, 2)

    def test_purchase_at_max_tickets(self, orchestrator, payment_gateway, seat_reservation_gateway):
        """A 25 ticket purchase succeeds."""
        outcome = orchestrator.purchase(1234, [TicketRequest(ADULT, 20), TicketRequest(CHILD, 5)])

        assert (outcome.total_cost, outcome.total_seats) == (Decimal("575"), 25)
        payment_gateway.make_payment.assert_called_once_with(1234, Decimal("575"))
        seat_reservation_gateway.reserve_seat.assert_called_once_with(1234, 25)

    def test_purchase_with_split_requests(self, orchestrator):
        """Same-type requests are summed before pricing."""
        outcome = orchestrator.purchase(
            1234,
            [
                TicketRequest(ADULT, 1),
                TicketRequest(ADULT, 2),
                TicketRequest(CHILD, 1),
                TicketRequest(CHILD, 1),
                TicketRequest(INFANT, 1),
                TicketRequest(INFANT, 1),
            ],
        )

        assert (outcome.total_cost, outcome.total_seats) == (Decimal("105"), 5)

    def test_payment_happens_before_reservation(
        self, orchestrator, payment_gateway, seat_reservation_gateway
    ):
        """make_payment is called before reserve_seat."""
        calls = []
        payment_gateway.make_payment.side_effect = lambda *args: calls.append("pay")
        seat_reservation_gateway.reserve_seat.side_effect = lambda *args: calls.append("reserve")

        orchestrator.purchase(1, [TicketRequest(ADULT, 1)])

        assert calls == ["pay", "reserve"]

    def test_each_attempt_gets_a_new_transaction_id(self, orchestrator, id_generator):
        """The id generator is asked once per attempt."""
        id_generator.new_id.side_effect = ["txn-a", "txn-b"]

        first = orchestrator.purchase(1, [TicketRequest(ADULT, 1)])
        second = orchestrator.purchase(1, [TicketRequest(ADULT, 1)])

        assert (first.transaction_id, second.transaction_id) == ("txn-a", "txn-b")

    def test_default_collaborators(self):
        """Without injected gateways the third-party defaults are used."""
        orchestrator = PurchaseOrchestrator()

        outcome = orchestrator.purchase(42, [TicketRequest(ADULT, 1)])

        assert outcome.success is True
        assert isinstance(orchestrator._payment_gateway, TicketPaymentService)
        assert isinstance(orchestrator._seat_reservation_gateway, SeatReservationService)
        assert len(outcome.transaction_id) == 36


class TestPurchaseRejected:
    """Tests for rejected purchases."""

    @pytest.mark.parametrize(
        ("account_id", "ticket_requests", "error"),
        [
            (0, [TicketRequest(ADULT, 1)], InvalidAccountError),
            (None, [], InvalidAccountError),
            (123, [], EmptyRequestError),
            (123, None, EmptyRequestError),
            (123, [TicketRequest(CHILD, 1), TicketRequest(INFANT, 1)], NoAdultError),
            (123, [TicketRequest(ADULT, 4), TicketRequest(INFANT, 5)], InfantExceedsAdultError),
            (
                123,
                [TicketRequest(ADULT, 21), TicketRequest(CHILD, 2), TicketRequest(INFANT, 3)],
                MaxTicketsExceededError,
            ),
        ],
    )
    def test_rejection_has_no_side_effects(
        self,
        orchestrator,
        payment_gateway,
        seat_reservation_gateway,
        account_id,
        ticket_requests,
        error,
    ):
        """Validation errors propagate and nothing is paid or reserved."""
        with pytest.raises(error):
            orchestrator.purchase(account_id, ticket_requests)

        payment_gateway.make_payment.assert_not_called()
        seat_reservation_gateway.reserve_seat.assert_not_called()

    def test_rejection_is_logged(self, orchestrator):
        """A rejected attempt is logged with its error code."""
        with capture_logs() as logs, pytest.raises(NoAdultError):
            orchestrator.purchase(123, [TicketRequest(CHILD, 1)])

        assert logs[0]["event"] == "purchase_rejected"
        assert logs[0]["code"] == "NO_ADULT"
        assert logs[0]["transaction_id"] == "txn-0001"


class TestGatewayFailures:
    """Tests for errors raised by payment and reservation."""

    def test_payment_error_propagates_and_skips_reservation(
        self, orchestrator, payment_gateway, seat_reservation_gateway
    ):
        """A payment failure is raised unchanged and no seats are reserved."""
        failure = RuntimeError("card declined")
        payment_gateway.make_payment.side_effect = failure

        with pytest.raises(RuntimeError) as exc_info:
            orchestrator.purchase(1, [TicketRequest(ADULT, 1)])

        assert exc_info.value is failure
        seat_reservation_gateway.reserve_seat.assert_not_called()

    def test_reservation_error_after_payment_propagates(
        self, orchestrator, payment_gateway, seat_reservation_gateway
    ):
        """A reservation failure is raised unchanged; the payment stands."""
        failure = RuntimeError("no seats")
        seat_reservation_gateway.reserve_seat.side_effect = failure

        with capture_logs() as logs, pytest.raises(RuntimeError) as exc_info:
            orchestrator.purchase(1, [TicketRequest(ADULT, 1)])

        assert exc_info.value is failure
        payment_gateway.make_payment.assert_called_once_with(1, Decimal("25"))
        assert [entry["event"] for entry in logs] == ["seat_reservation_failed_after_payment"]
        assert logs[0]["log_level"] == "error"

    def test_injected_validator_is_used(self, payment_gateway, seat_reservation_gateway):
        """A substituted validator decides admissibility."""
        validator = Mock()
        validator.validate.side_effect = EmptyRequestError()
        orchestrator = PurchaseOrchestrator(
            payment_gateway=payment_gateway,
            seat_reservation_gateway=seat_reservation_gateway,
            validator=validator,
        )

        with pytest.raises(EmptyRequestError):
            orchestrator.purchase(1, [TicketRequest(ADULT, 1)])

        validator.validate.assert_called_once()
