from typing import Any, Dict

from fastapi import APIRouter, Depends

from paygate.api.deps import get_payment_service
from paygate.schemas.payments import (
    ErrorResponse,
    OrderCreateRequest,
    PaymentVerifyRequest,
    PaymentVerifyResponse,
)
from paygate.services.payments import PaymentService

router = APIRouter(tags=["payments"])


# sync handlers: the SDK call blocks, so FastAPI runs these in its threadpool
@router.post("/orders", responses={500: {"model": ErrorResponse}})
def create_order(
    payload: OrderCreateRequest,
    service: PaymentService = Depends(get_payment_service),
) -> Dict[str, Any]:
    """create a gateway order; the gateway's order object is returned as-is."""
    return service.create_order(payload.amount)


@router.post(
    "/verify",
    response_model=PaymentVerifyResponse,
    responses={401: {"model": ErrorResponse}},
)
def verify_payment(
    payload: PaymentVerifyRequest,
    service: PaymentService = Depends(get_payment_service),
) -> PaymentVerifyResponse:
    """verify the checkout signature for a completed payment."""
    service.confirm_payment(
        order_id=payload.order_id,
        payment_id=payload.razorpay_payment_id,
        signature=payload.razorpay_signature,
    )
    return PaymentVerifyResponse()
