import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from paygate import __version__
from paygate.api.v1.api import router as api_v1_router
from paygate.api.v1.routers import health as health_router
from paygate.core.config import Settings, load_settings
from paygate.core.errors import InvalidInput, SignatureMismatch, UpstreamError
from paygate.core.logging import setup_logging
from paygate.services.payments import PaymentService, PaymentsProvider, get_payments_provider

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_ALLOW_HEADERS = ["Origin", "Content-Type", "Authorization"]
CORS_EXPOSE_HEADERS = ["Content-Length"]
CORS_MAX_AGE = 12 * 60 * 60


def _validation_details(exc: RequestValidationError):
    # drop pydantic's ctx/url noise, keep what the caller can act on
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _invalid_input_body(details) -> dict:
    body = {"error": InvalidInput.message}
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_invalid_input_body(_validation_details(exc)),
        )

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        return JSONResponse(status_code=400, content=_invalid_input_body(exc.details))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # body parse failures (e.g. non-utf8 bytes) surface as a bare 400 HTTPException
        if exc.status_code == 400:
            return JSONResponse(status_code=400, content=_invalid_input_body(exc.detail))
        return await http_exception_handler(request, exc)

    @app.exception_handler(SignatureMismatch)
    async def signature_mismatch_handler(request: Request, exc: SignatureMismatch):
        return JSONResponse(status_code=401, content={"error": SignatureMismatch.message})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        # raw gateway error is logged by the service; never returned
        return JSONResponse(status_code=500, content={"error": UpstreamError.message})


def create_app(settings: Settings, provider: Optional[PaymentsProvider] = None) -> FastAPI:
    """build the ASGI app around an explicit Settings value."""
    app = FastAPI(title="Paygate API", version=__version__)

    app.state.settings = settings
    app.state.payment_service = PaymentService(
        settings=settings,
        provider=provider or get_payments_provider(settings),
    )

    # only the configured origins may talk to us cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
        max_age=CORS_MAX_AGE,
    )

    register_exception_handlers(app)

    # mount our API routes
    app.include_router(api_v1_router, prefix="/api/v1")
    app.include_router(health_router.router)

    return app


def get_application() -> FastAPI:
    """no-arg factory for `uvicorn --factory paygate.main:get_application`."""
    settings = load_settings()
    setup_logging(settings.LOG_LEVEL)
    return create_app(settings)


def run() -> None:
    # ConfigError propagates here so a misconfigured service never starts listening
    settings = load_settings()
    setup_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info(
        f"Starting payments API: provider={settings.PAYMENTS_PROVIDER}, "
        f"port={settings.PORT}, allowed_origins={len(settings.ALLOWED_ORIGINS)}"
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
