"""Gateway interfaces for the collaborators a purchase depends on.

Gateways must be swappable; the orchestrator only sees these interfaces.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: Decimal) -> None:
        """Charge ``amount`` to the account. Raise on failure."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account. Raise on failure."""
        ...


class TransactionIdGenerator(ABC):
    """Interface for producing transaction identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new opaque, unique transaction ID."""
        ...
