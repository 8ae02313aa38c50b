import json

import httpx
import pytest

from src.adapter.services.notification_sink import HttpNotificationSink, LoggingNotificationSink
from src.app.services.notification_sink import DomainEvent, publish_safely


def _event() -> DomainEvent:
    return DomainEvent(name="slot_request.approved", payload={"credited": {"VIP": 1}})


@pytest.mark.asyncio
async def test_http_sink_posts_event_as_json():
    received = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(json.loads(request.content))
        return httpx.Response(202)

    sink = HttpNotificationSink("http://hooks.test/events", transport=httpx.MockTransport(handler))

    await sink.publish(_event())

    assert received[0]["name"] == "slot_request.approved"
    assert received[0]["payload"] == {"credited": {"VIP": 1}}
    assert "occurred_at" in received[0]


@pytest.mark.asyncio
async def test_http_sink_raises_on_error_status():
    sink = HttpNotificationSink(
        "http://hooks.test/events",
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        await sink.publish(_event())


@pytest.mark.asyncio
async def test_publish_safely_drops_delivery_failures(caplog):
    sink = HttpNotificationSink(
        "http://hooks.test/events",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )

    await publish_safely(sink, _event())

    assert "Failed to deliver slot_request.approved notification" in caplog.text


@pytest.mark.asyncio
async def test_publish_safely_without_sink_is_a_no_op():
    await publish_safely(None, _event())


@pytest.mark.asyncio
async def test_logging_sink_logs_event(caplog):
    caplog.set_level("INFO")

    await LoggingNotificationSink().publish(_event())

    assert "slot_request.approved" in caplog.text
