from fastapi import APIRouter

from paygate.api.v1.routers import payments as payments_router

router = APIRouter()

router.include_router(payments_router.router)
