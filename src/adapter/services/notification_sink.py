"""
Notification sink adapters.

LoggingNotificationSink is the default; HttpNotificationSink posts each event
as JSON to NOTIFICATION_WEBHOOK_URL.
"""

import logging

import httpx

from src.app.services.notification_sink import DomainEvent, NotificationSink

logger = logging.getLogger(__name__)


class LoggingNotificationSink(NotificationSink):
    async def publish(self, event: DomainEvent) -> None:
        logger.info("Notification %s: %s", event.name, event.payload)


class HttpNotificationSink(NotificationSink):
    """Delivers events to a webhook; non-2xx responses raise"""

    def __init__(self, url: str, timeout: float = 5.0, transport=None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def publish(self, event: DomainEvent) -> None:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.url, json=event.model_dump(mode="json"))
            response.raise_for_status()
