"""Shared fixtures for the payments API tests."""
import pytest
from fastapi.testclient import TestClient

from paygate.core.config import Settings
from paygate.main import create_app
from paygate.services.payments import PaymentService
from tests.helpers import TEST_ORIGIN, TEST_SECRET, RecordingProvider


@pytest.fixture
def settings() -> Settings:
    return Settings(
        RAZORPAY_API_KEY="rzp_test_key",
        RAZORPAY_SECRET_KEY=TEST_SECRET,
        ALLOWED_ORIGINS=[TEST_ORIGIN],
        PAYMENTS_PROVIDER="mock",
    )


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def service(settings, provider) -> PaymentService:
    return PaymentService(settings=settings, provider=provider)


@pytest.fixture
def client(settings, provider):
    app = create_app(settings, provider=provider)
    with TestClient(app) as c:
        yield c
