"""
Decline Slot Request Use Case
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found
from src.app.services.notification_sink import DomainEvent, NotificationSink, publish_safely
from src.app.services.role_policy import can_act_on, can_manage_accounts
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, SlotRequestStatus, SystemRole

from .approve_slot_request_use_case import already_decided
from .dtos import SlotRequestResponse

logger = logging.getLogger(__name__)


class DeclineSlotRequestUseCase:
    """
    Use case for declining a slot request.

    Business Rules:
    - Request must be pending (REQUEST_ALREADY_DECIDED otherwise)
    - No ledger effect
    - Publishes slot_request.declined after commit
    """

    def __init__(self, uow: UnitOfWork, notifications: Optional[NotificationSink] = None):
        self.uow = uow
        self.notifications = notifications

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        request_id: UUID,
        note: Optional[str] = None,
    ) -> Result[SlotRequestResponse]:
        async with self.uow:
            slot_request = await self.uow.slot_requests.get_by_id(request_id)
            if slot_request is None:
                return Return.err(not_found("SLOT_REQUEST_NOT_FOUND", "Slot request", request_id))

            if not slot_request.is_pending:
                return Return.err(already_decided(slot_request.status))

            account = await self.uow.accounts.get_by_id(slot_request.account_id)
            target_role = account.role if account else SystemRole.user
            if not can_manage_accounts(actor_role) or not can_act_on(
                actor_id, actor_role, slot_request.account_id, target_role
            ):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot decide this slot request")
                )

            decided = await self.uow.slot_requests.decide(
                slot_request.id,
                SlotRequestStatus.declined,
                decided_by=actor_id,
                decided_at=datetime.utcnow(),
                decision_note=note,
            )
            if not decided:
                return Return.err(already_decided(None))

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=slot_request.account_id,
                    action="slot_request_declined",
                    event_metadata={
                        "slot_request_id": str(slot_request.id),
                        "requested_slots": slot_request.requested_slots,
                        "note": note,
                    },
                )
            )

            await self.uow.commit()

            response = SlotRequestResponse.from_request(slot_request)

        logger.info("Slot request %s declined by %s", request_id, actor_id)

        await publish_safely(
            self.notifications,
            DomainEvent(
                name="slot_request.declined",
                payload={
                    "slot_request_id": response.id,
                    "account_id": response.account_id,
                    "requested_slots": response.requested_slots,
                    "note": note,
                },
            ),
        )
        return Return.ok(response)
