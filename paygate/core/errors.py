from typing import Any, Optional


class PaymentsError(Exception):
    """base error for the payments facade."""

    message: str = "Payment processing failed"

    def __init__(self, message: Optional[str] = None, details: Any = None) -> None:
        self.message = message or self.__class__.message
        self.details = details
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class InvalidInput(PaymentsError):
    """malformed or missing request fields (HTTP 400)."""

    message = "Invalid request format"


class UpstreamError(PaymentsError):
    """the payment gateway call failed (HTTP 500, generic message only)."""

    message = "Failed to create order"


class SignatureMismatch(PaymentsError):
    """computed signature did not match the claimed one (HTTP 401)."""

    message = "Invalid payment signature"


class ConfigError(PaymentsError):
    """missing or invalid startup configuration; aborts startup."""

    message = "Missing required configuration"
