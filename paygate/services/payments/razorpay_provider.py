from typing import Any, Dict, Optional

import razorpay

from .base import PaymentsProvider


class RazorpayPayments(PaymentsProvider):
    """orders via the official Razorpay SDK."""

    name = "razorpay"

    def __init__(self, api_key: str, secret_key: str, client: Optional[Any] = None) -> None:
        self._client = client or razorpay.Client(auth=(api_key, secret_key))

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # SDK errors (razorpay.errors.*, requests exceptions) propagate to the caller
        return self._client.order.create(data=data)
