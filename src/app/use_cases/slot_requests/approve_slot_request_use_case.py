"""
Approve Slot Request Use Case

Handles the (possibly partial) approval of a pending slot request.
"""

import logging
from datetime import datetime
from typing import Dict, Mapping, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.notification_sink import DomainEvent, NotificationSink, publish_safely
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.role_policy import can_act_on, can_manage_accounts
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent, SlotRequestStatus, SystemRole

from .dtos import ApprovalResponse, SlotRequestResponse

logger = logging.getLogger(__name__)


class ApproveSlotRequestUseCase:
    """
    Use case for approving a slot request.

    Business Rules:
    - Request must be pending (REQUEST_ALREADY_DECIDED otherwise)
    - approved_amounts omitted means approve exactly what was requested
    - 0 <= approved[c] <= requested[c] for every category; a category that
      was not requested counts as requested 0
    - At least one approved amount must be positive
    - Approved amounts are added to the current totals, never overwrite them
    - Status check, ledger increments and status write share one
      transaction; the status write only succeeds while still pending, so a
      concurrent decision rolls back this approval's credits
    - approved_slots is stored next to the requested slots
    - Publishes slot_request.approved after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        notifications: Optional[NotificationSink] = None,
    ):
        self.uow = uow
        self.categories = categories
        self.ledger = QuotaLedger(uow, categories)
        self.notifications = notifications

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        request_id: UUID,
        approved_amounts: Optional[Mapping[str, int]] = None,
        note: Optional[str] = None,
    ) -> Result[ApprovalResponse]:
        """
        Execute approve slot request use case.

        Args:
            actor_id: Account approving the request
            actor_role: Role of the approver
            request_id: Slot request to approve
            approved_amounts: Per-category amounts to grant, None for "as requested"
            note: Optional decision note shown to the requester

        Returns:
            Result with the approved request and credited totals, or Error
        """
        async with self.uow:
            slot_request = await self.uow.slot_requests.get_by_id(request_id)
            if slot_request is None:
                return Return.err(not_found("SLOT_REQUEST_NOT_FOUND", "Slot request", request_id))

            if not slot_request.is_pending:
                return Return.err(already_decided(slot_request.status))

            account = await self.uow.accounts.get_by_id(slot_request.account_id)
            if account is None:
                return Return.err(
                    not_found("ACCOUNT_NOT_FOUND", "Account", slot_request.account_id)
                )

            if not can_manage_accounts(actor_role) or not can_act_on(
                actor_id, actor_role, account.id, account.role
            ):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot decide this slot request")
                )

            requested = slot_request.requested_slots
            approved_result = self._validate_amounts(requested, approved_amounts)
            if approved_result.is_err():
                return approved_result
            approved = approved_result.value

            new_totals: Dict[str, int] = {}
            for category, amount in approved.items():
                if amount <= 0:
                    continue
                result = await self.ledger.increment_total(account, category, amount)
                if result.is_err():
                    return result
                new_totals[category] = result.value.total

            decided_at = datetime.utcnow()
            decided = await self.uow.slot_requests.decide(
                slot_request.id,
                SlotRequestStatus.approved,
                decided_by=actor_id,
                decided_at=decided_at,
                approved_slots=approved,
                decision_note=note,
            )
            if not decided:
                # Lost the race; leaving without commit rolls the credits back
                return Return.err(already_decided(None))

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=account.id,
                    action="slot_request_approved",
                    event_metadata={
                        "slot_request_id": str(slot_request.id),
                        "requested_slots": requested,
                        "approved_slots": approved,
                        "new_totals": new_totals,
                    },
                )
            )

            await self.uow.commit()

            response = ApprovalResponse(
                request=SlotRequestResponse.from_request(slot_request),
                credited={c: a for c, a in approved.items() if a > 0},
                new_totals=new_totals,
            )

        logger.info(
            "Slot request %s approved by %s: requested=%s approved=%s",
            request_id,
            actor_id,
            requested,
            approved,
        )

        await publish_safely(
            self.notifications,
            DomainEvent(
                name="slot_request.approved",
                payload={
                    "slot_request_id": str(request_id),
                    "account_id": response.request.account_id,
                    "requested_slots": requested,
                    "approved_slots": approved,
                    "note": note,
                },
            ),
        )
        return Return.ok(response)

    def _validate_amounts(
        self, requested: Mapping[str, int], approved_amounts: Optional[Mapping[str, int]]
    ) -> Result[Dict[str, int]]:
        if approved_amounts is None:
            return Return.ok({c: requested.get(c, 0) for c in self.categories})

        approved = self.categories.zeros()
        for raw_category, amount in approved_amounts.items():
            category = self.categories.resolve(raw_category)
            if category is None:
                return Return.err(
                    validation_error(
                        "INVALID_CATEGORY",
                        "approved_slots",
                        f"Invalid category: {raw_category}. "
                        f"Must be one of: {', '.join(self.categories)}",
                    )
                )
            if amount < 0:
                return Return.err(
                    validation_error(
                        "NEGATIVE_AMOUNT",
                        "approved_slots",
                        f"approved_slots.{category} cannot be negative",
                    )
                )
            if amount > requested.get(category, 0):
                return Return.err(
                    validation_error(
                        "APPROVED_EXCEEDS_REQUESTED",
                        "approved_slots",
                        f"approved_slots.{category} ({amount}) exceeds requested "
                        f"({requested.get(category, 0)})",
                    )
                )
            approved[category] = amount

        if not any(amount > 0 for amount in approved.values()):
            return Return.err(
                validation_error(
                    "NOTHING_APPROVED",
                    "approved_slots",
                    "approved_slots must approve at least one slot; decline the request instead",
                )
            )
        return Return.ok(approved)


def already_decided(status: Optional[SlotRequestStatus]) -> Error:
    if status is None:
        return Error("REQUEST_ALREADY_DECIDED", "Slot request has already been decided")
    return Error("REQUEST_ALREADY_DECIDED", f"Slot request is already {status.value}")
