"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    NO_ADULT = "NO_ADULT"
    INFANT_EXCEEDS_ADULT = "INFANT_EXCEEDS_ADULT"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PurchaseRejectedError(DomainError):
    """A purchase attempt was refused. Subclasses carry the reason."""


class InvalidAccountError(PurchaseRejectedError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self, account_id: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )
        self.account_id = account_id


class EmptyRequestError(PurchaseRejectedError):
    """Raised when no tickets are requested."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="No tickets requested",
        )


class InvalidTicketTypeError(PurchaseRejectedError):
    """Raised when a ticket type is not ADULT, CHILD or INFANT."""

    def __init__(self, ticket_type: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Ticket type must be ADULT, CHILD, or INFANT",
        )
        self.ticket_type = ticket_type


class InvalidTicketCountError(PurchaseRejectedError):
    """Raised when a ticket count is not a positive integer."""

    def __init__(self, count: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message="Number of tickets must be a positive integer",
        )
        self.count = count


class InvalidTicketRequestError(PurchaseRejectedError):
    """Raised when a batch entry is not a ticket request."""

    def __init__(self, entry: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message="Invalid ticket request format",
        )
        self.entry = entry


class NoAdultError(PurchaseRejectedError):
    """Raised when a purchase contains no adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ADULT,
            message="Adult ticket required",
        )


class InfantExceedsAdultError(PurchaseRejectedError):
    """Raised when there are more infants than adult laps to sit on."""

    def __init__(self, infants: int, adults: int) -> None:
        super().__init__(
            code=ErrorCode.INFANT_EXCEEDS_ADULT,
            message="Infants cannot exceed number of adults",
        )
        self.infants = infants
        self.adults = adults


class MaxTicketsExceededError(PurchaseRejectedError):
    """Raised when a purchase is over the per-transaction ticket limit."""

    def __init__(self, requested: int, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.MAX_TICKETS_EXCEEDED,
            message=f"Cannot purchase more than {maximum} tickets at a time",
        )
        self.requested = requested
        self.maximum = maximum
