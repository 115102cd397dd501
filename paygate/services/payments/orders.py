import itertools
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from paygate.core.errors import InvalidInput

CURRENCY = "INR"
RECEIPT_PREFIX = "rcpt_"

# process-wide sequence; next() on itertools.count is atomic under the GIL
_receipt_seq = itertools.count(1)


def _gen_receipt(clock: Callable[[], int] = time.time_ns) -> str:
    # timestamp plus sequence: unique within the process even if the wall clock steps back
    return f"{RECEIPT_PREFIX}{clock()}_{next(_receipt_seq)}"


def validate_amount(amount: Any) -> int:
    """amount must be a positive int in the smallest currency subunit (paise)."""
    # bool is an int subclass; reject it explicitly
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidInput(details="amount must be an integer number of paise")
    if amount < 1:
        raise InvalidInput(details="amount must be at least 1")
    return amount


def build_order_payload(
    amount: int,
    now: Optional[datetime] = None,
    clock: Callable[[], int] = time.time_ns,
) -> Dict[str, Any]:
    """build the order body sent to the gateway."""
    amount = validate_amount(amount)
    created_at = (now or datetime.now(tz=timezone.utc)).isoformat(timespec="seconds")
    return {
        "amount": amount,
        "currency": CURRENCY,
        "receipt": _gen_receipt(clock),
        "notes": {
            "created_at": created_at,
        },
    }
