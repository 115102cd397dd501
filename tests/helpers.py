import hashlib
import hmac
from typing import Any, Dict, List

from paygate.services.payments import MockPayments, PaymentsProvider

TEST_SECRET = "testsecret"
TEST_ORIGIN = "http://localhost:3000"


class RecordingProvider(MockPayments):
    """mock provider that remembers every payload it was given."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(data)
        return super().create_order(data)


class FailingProvider(PaymentsProvider):
    """provider whose gateway is always down."""

    name = "failing"

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.calls += 1
        raise self.error


def sign(order_id: str, payment_id: str, secret: str = TEST_SECRET) -> str:
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()
