import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


def encode_cursor(event: AuditEvent) -> str:
    raw = f"{event.created_at.isoformat()}|{event.id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("utf-8")


def decode_cursor(cursor: str) -> Optional[Tuple[datetime, UUID]]:
    """(created_at, id) of the last event of the previous page, None if unreadable"""
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("utf-8")).decode("utf-8")
        timestamp, event_id = raw.split("|", 1)
        return datetime.fromisoformat(timestamp), UUID(event_id)
    except (ValueError, TypeError):
        return None


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_paginated(
        self,
        account_id: Optional[UUID] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Newest-first audit events, optionally about one account.

        The cursor is the (created_at, id) pair of the last event returned,
        so events sharing a timestamp are neither repeated nor skipped.
        An unreadable cursor starts from the newest event.
        """
        stmt = select(AuditEvent)
        if account_id is not None:
            stmt = stmt.where(AuditEvent.account_id == account_id)

        position = decode_cursor(cursor) if cursor else None
        if position is not None:
            created_at, event_id = position
            stmt = stmt.where(
                or_(
                    AuditEvent.created_at < created_at,
                    and_(AuditEvent.created_at == created_at, AuditEvent.id < event_id),
                )
            )

        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        events = list(result.all())

        has_more = len(events) > limit
        if has_more:
            events = events[:limit]

        next_cursor = encode_cursor(events[-1]) if has_more and events else None
        return events, next_cursor
