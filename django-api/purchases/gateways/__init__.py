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

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "TransactionIdGenerator",
    "TicketPaymentService",
    "SeatReservationService",
    "UuidTransactionIdGenerator",
]
