from fastapi import APIRouter, Depends

from paygate.api.deps import get_settings
from paygate.core.config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "env": settings.APP_ENV, "provider": settings.PAYMENTS_PROVIDER}
