import re
from decimal import Decimal

from stayhub.schemas.common.enums import PaymentMethod, PaymentStatus
from stayhub.services.base import ErrorCode
from stayhub.services.payment import PaymentSession

CARD = {
    "card_number": "4242 4242 4242 4242",
    "card_holder": "Ada Guest",
    "expiry_date": "12/30",
    "cvv": "123",
}


def make_session(client, booking_id: int = 100) -> PaymentSession:
    return PaymentSession(client.payments, booking_id, Decimal("252"))


class TestSubmit:

    async def test_sends_generated_key_in_header(self, logged_in_client, backend):
        payment = make_session(logged_in_client)

        result = await payment.submit(PaymentMethod.CARD, CARD)

        assert result.is_success
        assert re.fullmatch(r"payment_\d+_[0-9a-z]{9}", payment.idempotency_key)
        sent = backend.last("/api/payments")
        assert sent["headers"]["idempotency-key"] == payment.idempotency_key
        assert sent["json"]["idempotency_key"] == payment.idempotency_key
        assert sent["json"]["amount"] == 252
        assert sent["json"]["payment_method"] == "card"
        assert payment.status is PaymentStatus.PENDING
        assert payment.transaction_id == "txn_1"

    async def test_card_number_is_reduced_to_last_four(self, logged_in_client, backend):
        payment = make_session(logged_in_client)

        await payment.submit(PaymentMethod.CARD, {**CARD, "card_number": "4242-4242-4242-4242"})

        sent = backend.last("/api/payments")["json"]["payment_details"]
        assert sent == {"card_number": "4242", "card_holder": "Ada Guest", "expiry_date": "12/30"}

    async def test_account_number_is_reduced_to_last_four(self, logged_in_client, backend):
        payment = make_session(logged_in_client)

        result = await payment.submit(PaymentMethod.BANK, {
            "account_number": 12345678,
            "account_holder": "Ada Guest",
            "routing_number": "021000021",
        })

        assert result.is_success
        sent = backend.last("/api/payments")["json"]["payment_details"]
        assert sent == {"account_number": "5678", "account_holder": "Ada Guest", "routing_number": "021000021"}

    async def test_invalid_card_form_is_not_sent(self, logged_in_client, backend):
        payment = make_session(logged_in_client)

        result = await payment.submit(PaymentMethod.CARD, {**CARD, "cvv": "12"})

        assert not result.is_success
        assert result.error.code is ErrorCode.VALIDATION_ERROR
        assert "CVV must be 3 or 4 digits" in result.errors
        assert payment.idempotency_key is None
        assert not [r for r in backend.requests if r["path"] == "/api/payments"]

    async def test_bank_transfer_requires_account_fields(self, logged_in_client):
        payment = make_session(logged_in_client)

        result = await payment.submit(PaymentMethod.BANK, {"account_holder": "Ada Guest"})

        assert not result.is_success
        assert "Account number is required" in result.errors
        assert result.error.details["fields"]["routing_number"] == "Routing number is required"

    async def test_server_message_is_reported(self, logged_in_client):
        payment = make_session(logged_in_client)

        result = await payment.submit(PaymentMethod.CARD, {**CARD, "card_number": "4000000000000002"})

        assert not result.is_success
        assert result.message == "Card declined"
        assert payment.status is None


class TestRetryAndCancel:

    async def test_retry_reuses_the_same_key(self, logged_in_client, backend):
        payment = make_session(logged_in_client)
        await payment.submit(PaymentMethod.CARD, CARD)
        first_key = payment.idempotency_key

        first = await payment.retry()
        second = await payment.retry()

        assert first.is_success and second.is_success
        retries = [r for r in backend.requests if r["path"] == "/api/payments/100/retry"]
        assert [r["headers"]["idempotency-key"] for r in retries] == [first_key, first_key]
        assert payment.idempotency_key == first_key
        assert payment.transaction_id == "txn_2"

    async def test_retry_before_submit_is_rejected(self, logged_in_client, backend):
        result = await make_session(logged_in_client).retry()

        assert result.error.code is ErrorCode.INVALID_STATE
        assert all("retry" not in r["path"] for r in backend.requests)

    async def test_failed_submission_keeps_key_for_retry(self, logged_in_client, backend):
        payment = make_session(logged_in_client)
        await payment.submit(PaymentMethod.CARD, {**CARD, "card_number": "4000000000000002"})
        key = payment.idempotency_key

        await payment.submit(PaymentMethod.CARD, CARD)

        assert payment.idempotency_key == key
        assert backend.last("/api/payments")["headers"]["idempotency-key"] == key

    async def test_cancel(self, logged_in_client, backend):
        payment = make_session(logged_in_client)

        result = await payment.cancel()

        assert result.is_success
        assert result.message == "Payment cancelled"
        assert payment.status is PaymentStatus.CANCELLED
        assert backend.last("/api/payments/100/cancel")["method"] == "POST"
