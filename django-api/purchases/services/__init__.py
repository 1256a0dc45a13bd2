from django.conf import settings
from django.utils.module_loading import import_string

from purchases.services.pricing import PricingCalculator
from purchases.services.purchase_orchestrator import PurchaseOrchestrator
from purchases.services.validator import PurchaseValidator

__all__ = [
    "PricingCalculator",
    "PurchaseOrchestrator",
    "PurchaseValidator",
    "build_purchase_orchestrator",
]


def build_purchase_orchestrator() -> PurchaseOrchestrator:
    """Build an orchestrator wired with the gateways named in settings.PURCHASES."""
    config = settings.PURCHASES
    return PurchaseOrchestrator(
        payment_gateway=import_string(config["PAYMENT_GATEWAY"])(),
        seat_reservation_gateway=import_string(config["SEAT_RESERVATION_GATEWAY"])(),
        id_generator=import_string(config["TRANSACTION_ID_GENERATOR"])(),
    )
