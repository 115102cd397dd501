from fastapi import Request

from paygate.core.config import Settings
from paygate.services.payments import PaymentService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service
