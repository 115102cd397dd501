import time
import uuid
from typing import Any, Dict

from .base import PaymentsProvider


class MockPayments(PaymentsProvider):
    """in-process provider returning Razorpay-shaped orders, no network."""

    name = "mock"

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:
        amount = data["amount"]
        return {
            "id": f"order_{uuid.uuid4().hex[:14]}",
            "entity": "order",
            "amount": amount,
            "amount_paid": 0,
            "amount_due": amount,
            "currency": data["currency"],
            "receipt": data.get("receipt"),
            "offer_id": None,
            "status": "created",
            "attempts": 0,
            "notes": dict(data.get("notes") or {}),
            "created_at": int(time.time()),
        }
