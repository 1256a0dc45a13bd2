"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from purchases.gateways.interfaces import (
    PaymentGateway,
    SeatReservationGateway,
    TransactionIdGenerator,
)
from purchases.services import PurchaseOrchestrator


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_gateway() -> Mock:
    return Mock(spec=PaymentGateway)


@pytest.fixture
def seat_reservation_gateway() -> Mock:
    return Mock(spec=SeatReservationGateway)


@pytest.fixture
def id_generator() -> Mock:
    generator = Mock(spec=TransactionIdGenerator)
    generator.new_id.return_value = "txn-0001"
    return generator


@pytest.fixture
def orchestrator(
    payment_gateway: Mock, seat_reservation_gateway: Mock, id_generator: Mock
) -> PurchaseOrchestrator:
    return PurchaseOrchestrator(
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
        id_generator=id_generator,
    )
