import asyncio

import pytest

from stayhub.schemas.common.enums import PaymentStatus
from stayhub.services.payment import PaymentStatusPoller


class TestPaymentStatusPoller:

    async def test_polls_every_three_seconds_until_terminal(self, logged_in_client, backend, fake_sleep):
        backend.status_sequence = ["pending", "pending", "completed"]
        updates = []
        poller = PaymentStatusPoller(
            logged_in_client.payments,
            100,
            interval=3.0,
            sleep=fake_sleep,
            on_update=lambda info: updates.append(info.status),
        )

        final = await poller.run()

        assert final.status is PaymentStatus.COMPLETED
        assert fake_sleep.calls == [3.0, 3.0]
        assert updates == [PaymentStatus.PENDING, PaymentStatus.PENDING, PaymentStatus.COMPLETED]
        assert poller.attempts == 3

    async def test_terminal_first_response_does_not_wait(self, logged_in_client, backend, fake_sleep):
        backend.status_sequence = ["failed"]
        poller = PaymentStatusPoller(logged_in_client.payments, 100, sleep=fake_sleep)

        final = await poller.run()

        assert final.status is PaymentStatus.FAILED
        assert fake_sleep.calls == []

    async def test_interval_defaults_to_settings(self, logged_in_client):
        poller = PaymentStatusPoller(logged_in_client.payments, 100)

        assert poller.interval == 3.0

    async def test_stops_after_max_attempts(self, logged_in_client, backend, fake_sleep):
        backend.payment_status = "pending"
        poller = PaymentStatusPoller(logged_in_client.payments, 100, sleep=fake_sleep, max_attempts=4)

        final = await poller.run()

        assert final.status is PaymentStatus.PENDING
        assert poller.attempts == 4
        assert len(fake_sleep.calls) == 3

    async def test_fetch_error_before_any_status_stops(self, logged_in_client, backend, fake_sleep):
        backend.token = "rotated"
        poller = PaymentStatusPoller(logged_in_client.payments, 100, sleep=fake_sleep)

        final = await poller.run()

        assert final is None
        assert poller.last_error is not None
        assert fake_sleep.calls == []

    async def test_cancelling_the_task_stops_polling(self, logged_in_client, backend):
        backend.payment_status = "pending"
        started = asyncio.Event()

        async def blocking_sleep(seconds):
            started.set()
            await asyncio.sleep(3600)

        poller = PaymentStatusPoller(logged_in_client.payments, 100, sleep=blocking_sleep)
        task = asyncio.create_task(poller.run())
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert poller.attempts == 1
