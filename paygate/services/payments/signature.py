"""
Razorpay payment signature helpers.

Razorpay signs a completed checkout as
    HMAC-SHA256(key=secret, msg="{order_id}|{payment_id}")
and hands the lowercase hex digest to the client as razorpay_signature.
The delimiter and field order are fixed by the gateway.
"""
import hashlib
import hmac
from typing import Union

from paygate.core.errors import InvalidInput

SIGNATURE_DELIMITER = "|"


def build_signature_message(order_id: str, payment_id: str) -> str:
    """canonical message the gateway signs."""
    return f"{order_id}{SIGNATURE_DELIMITER}{payment_id}"


def compute_signature(message: str, secret_key: Union[str, bytes]) -> str:
    """lowercase hex HMAC-SHA256 of message under secret_key."""
    if isinstance(secret_key, str):
        secret_key = secret_key.encode("utf-8")
    return hmac.new(secret_key, message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_payment_signature(
    order_id: str,
    payment_id: str,
    signature: str,
    secret_key: Union[str, bytes],
) -> bool:
    """
    Check a claimed checkout signature against the one we compute.

    Args:
        order_id: Server-side order id returned by order creation
        payment_id: razorpay_payment_id from checkout
        signature: razorpay_signature from checkout (hex)
        secret_key: Shared Razorpay key secret

    Returns:
        True only on an exact match. A mismatch (including a length
        mismatch) is a normal False result, never an exception.

    Raises:
        InvalidInput: if any field is missing or empty.
    """
    missing = [
        name
        for name, value in (
            ("order_id", order_id),
            ("razorpay_payment_id", payment_id),
            ("razorpay_signature", signature),
        )
        if not isinstance(value, str) or not value
    ]
    if missing:
        raise InvalidInput(details=f"missing required fields: {', '.join(missing)}")
    if not secret_key:
        raise InvalidInput(details="secret key is required")

    expected = compute_signature(build_signature_message(order_id, payment_id), secret_key)
    # compare bytes so non-ascii input is a mismatch rather than a TypeError
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
