"""
Tests for payments providers.
"""
from unittest.mock import MagicMock

import pytest

from paygate.services.payments import MockPayments
from paygate.services.payments.razorpay_provider import RazorpayPayments

PAYLOAD = {
    "amount": 100,
    "currency": "INR",
    "receipt": "rcpt_1",
    "notes": {"created_at": "2024-05-01T12:30:00+00:00"},
}


class TestMockPayments:
    def test_order_shape(self):
        order = MockPayments().create_order(PAYLOAD)
        assert order["id"].startswith("order_")
        assert order["entity"] == "order"
        assert order["amount"] == 100
        assert order["amount_due"] == 100
        assert order["amount_paid"] == 0
        assert order["currency"] == "INR"
        assert order["receipt"] == "rcpt_1"
        assert order["status"] == "created"
        assert order["notes"] == PAYLOAD["notes"]

    def test_ids_unique(self):
        provider = MockPayments()
        assert provider.create_order(PAYLOAD)["id"] != provider.create_order(PAYLOAD)["id"]


class TestRazorpayPayments:
    def test_delegates_to_sdk(self):
        client = MagicMock()
        client.order.create.return_value = {"id": "order_LIVE", "amount": 100}
        provider = RazorpayPayments("rzp_test_key", "secret", client=client)

        assert provider.create_order(PAYLOAD) == {"id": "order_LIVE", "amount": 100}
        client.order.create.assert_called_once_with(data=PAYLOAD)

    def test_sdk_errors_propagate(self):
        client = MagicMock()
        client.order.create.side_effect = RuntimeError("gateway down")
        provider = RazorpayPayments("rzp_test_key", "secret", client=client)

        with pytest.raises(RuntimeError):
            provider.create_order(PAYLOAD)

    def test_builds_sdk_client_from_keys(self):
        provider = RazorpayPayments("rzp_test_key", "secret")
        assert provider._client.auth == ("rzp_test_key", "secret")
