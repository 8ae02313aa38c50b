"""
Get Audit Events Use Case

Retrieves the capacity audit trail with pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SystemRole


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events.

    Business Rules:
    - Caller must be an Admin
    - Optionally scoped to one account
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, actor_email, account_id, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_role: SystemRole,
        account_id: Optional[UUID] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            actor_role: Role from the identity (must be admin)
            account_id: Only events about this account (optional)
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        if actor_role != SystemRole.admin:
            return Return.err(
                Error(
                    "INSUFFICIENT_ROLE",
                    "You do not have permission to view audit events",
                )
            )

        async with self.uow:
            events, next_cursor = await self.uow.audit_events.get_paginated(
                account_id=account_id, limit=limit, cursor=cursor
            )

            # Resolve actor emails once per actor
            emails: Dict[UUID, Optional[str]] = {}
            events_list = []
            for event in events:
                actor_email = None
                if event.actor_id:
                    if event.actor_id not in emails:
                        actor = await self.uow.accounts.get_by_id(event.actor_id)
                        emails[event.actor_id] = actor.email if actor else None
                    actor_email = emails[event.actor_id]

                events_list.append(
                    {
                        "action": event.action,
                        "actor_email": actor_email,
                        "account_id": str(event.account_id) if event.account_id else None,
                        "timestamp": event.created_at.isoformat() + "Z",
                        "metadata": event.event_metadata or {},
                    }
                )

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
