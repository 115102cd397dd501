import logging
from typing import Any, Dict

from paygate.core.config import Settings
from paygate.core.errors import SignatureMismatch, UpstreamError

from .base import PaymentsProvider
from .orders import build_order_payload
from .signature import verify_payment_signature

logger = logging.getLogger(__name__)


class PaymentService:
    """creates gateway orders and verifies checkout signatures.

    Holds no mutable state; one instance serves every request.
    """

    def __init__(self, settings: Settings, provider: PaymentsProvider) -> None:
        self._secret_key = settings.secret_key_bytes
        self.provider = provider

    def create_order(self, amount: int) -> Dict[str, Any]:
        """
        Create an order for `amount` paise.

        Raises InvalidInput before touching the gateway if the amount is bad,
        UpstreamError if the gateway call fails. No retries.
        """
        data = build_order_payload(amount)
        try:
            order = self.provider.create_order(data)
        except Exception as e:
            logger.exception(f"Error creating order (receipt={data['receipt']}): {e}")
            raise UpstreamError() from e

        logger.info(f"Order created: id={order.get('id')}, amount={amount}, receipt={data['receipt']}")
        return order

    def verify_payment(self, order_id: str, payment_id: str, signature: str) -> bool:
        """True when the checkout signature matches; raises InvalidInput on empty fields."""
        return verify_payment_signature(order_id, payment_id, signature, self._secret_key)

    def confirm_payment(self, order_id: str, payment_id: str, signature: str) -> None:
        """like verify_payment, but raises SignatureMismatch on a bad signature."""
        if not self.verify_payment(order_id, payment_id, signature):
            logger.warning(f"Invalid payment signature: order_id={order_id}, payment_id={payment_id}")
            raise SignatureMismatch()
        logger.info(f"Payment verified: order_id={order_id}, payment_id={payment_id}")
