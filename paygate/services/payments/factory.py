from paygate.core.config import Settings
from paygate.core.errors import ConfigError

from .base import PaymentsProvider
from .mock import MockPayments


def get_payments_provider(settings: Settings) -> PaymentsProvider:
    """pick the provider named by PAYMENTS_PROVIDER."""
    provider = settings.PAYMENTS_PROVIDER
    if provider == "mock":
        return MockPayments()
    if provider == "razorpay":
        from .razorpay_provider import RazorpayPayments

        return RazorpayPayments(
            api_key=settings.RAZORPAY_API_KEY,
            secret_key=settings.RAZORPAY_SECRET_KEY.get_secret_value(),
        )
    raise ConfigError(f"unknown payments provider: {provider}")
