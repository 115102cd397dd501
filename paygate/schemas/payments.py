from pydantic import BaseModel, Field


class OrderCreateRequest(BaseModel):
    amount: int = Field(..., ge=1, strict=True, description="Amount in paise")


class PaymentVerifyRequest(BaseModel):
    order_id: str = Field(..., min_length=1, strict=True, description="Server-side order id")
    razorpay_payment_id: str = Field(..., min_length=1, strict=True)
    razorpay_signature: str = Field(..., min_length=1, strict=True, description="Hex HMAC-SHA256 from checkout")


class PaymentVerifyResponse(BaseModel):
    success: bool = True
    message: str = "Payment verified successfully"


class ErrorResponse(BaseModel):
    error: str
