"""
Notification Sink

Domain events leave the core through this interface. Delivery is
fire-and-forget: a failing sink is logged and never fails the operation that
produced the event.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class DomainEvent(BaseModel):
    """Event published after a successful commit"""

    name: str  # e.g., "slot_request.approved"
    payload: Dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=lambda: datetime.utcnow())


class NotificationSink(ABC):
    """Receives workflow and template events (emails, in-app notices)"""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        pass


async def publish_safely(sink: Optional[NotificationSink], event: DomainEvent) -> None:
    """Best-effort delivery; failures are logged and dropped"""
    if sink is None:
        return
    try:
        await sink.publish(event)
    except Exception:
        logger.exception("Failed to deliver %s notification", event.name)
