from .base import PaymentsProvider
from .factory import get_payments_provider
from .mock import MockPayments
from .service import PaymentService
from .signature import build_signature_message, compute_signature, verify_payment_signature

__all__ = [
    "PaymentsProvider",
    "MockPayments",
    "PaymentService",
    "get_payments_provider",
    "build_signature_message",
    "compute_signature",
    "verify_payment_signature",
]
