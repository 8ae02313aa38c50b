"""
Submit Slot Request Use Case

Handles a User asking for more registration slots.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.notification_sink import DomainEvent, NotificationSink, publish_safely
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent, SlotRequest, SystemRole

from .dtos import SlotRequestResponse, SubmitSlotRequestCommand

logger = logging.getLogger(__name__)

DEFAULT_MAX_SLOTS_PER_CATEGORY = 200


class SubmitSlotRequestUseCase:
    """
    Use case for submitting a slot request.

    Business Rules:
    - reason must not be blank
    - At least one slot must be requested; counts cannot be negative
    - Categories must be known attendee categories
    - Counts are expanded into one assignment record per slot; detail
      records are used as given when provided
    - Counts and detail records that disagree are rejected
    - At most max_slots_per_category slots per category in one request
    - Only active User accounts submit; Admin and Super User are unlimited
    - Persisted as pending; publishes slot_request.submitted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        notifications: Optional[NotificationSink] = None,
        max_slots_per_category: int = DEFAULT_MAX_SLOTS_PER_CATEGORY,
    ):
        self.uow = uow
        self.categories = categories
        self.notifications = notifications
        self.max_slots_per_category = max_slots_per_category

    async def execute(
        self, account_id: UUID, command: SubmitSlotRequestCommand
    ) -> Result[SlotRequestResponse]:
        """
        Execute submit slot request use case.

        Args:
            account_id: Account submitting the request (from the identity)
            command: Requested counts and/or assignment records, and reason

        Returns:
            Result with the pending request, or Error
        """
        reason = (command.reason or "").strip()
        if not reason:
            return Return.err(
                validation_error("EMPTY_REASON", "reason", "reason must not be empty")
            )

        assignments_result = self._build_assignments(command)
        if assignments_result.is_err():
            return assignments_result
        assignments = assignments_result.value

        if not assignments:
            return Return.err(
                validation_error(
                    "EMPTY_SLOT_REQUEST",
                    "requested_slots",
                    "requested_slots must request at least one slot",
                )
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            if not account.active:
                return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

            if account.role != SystemRole.user:
                return Return.err(
                    validation_error(
                        "UNLIMITED_ROLE",
                        "role",
                        f"{account.role.label} accounts have unlimited capacity "
                        "and do not request slots",
                    )
                )

            slot_request = await self.uow.slot_requests.create(
                SlotRequest(account_id=account.id, slot_assignments=assignments, reason=reason)
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=account.id,
                    account_id=account.id,
                    action="slot_request_submitted",
                    event_metadata={
                        "slot_request_id": str(slot_request.id),
                        "requested_slots": slot_request.requested_slots,
                    },
                )
            )

            await self.uow.commit()

            response = SlotRequestResponse.from_request(slot_request)

        logger.info(
            "Slot request %s submitted by account %s: %s",
            response.id,
            account_id,
            response.requested_slots,
        )

        await publish_safely(
            self.notifications,
            DomainEvent(
                name="slot_request.submitted",
                payload={
                    "slot_request_id": response.id,
                    "account_id": response.account_id,
                    "requested_slots": response.requested_slots,
                    "reason": reason,
                },
            ),
        )
        return Return.ok(response)

    def _build_assignments(
        self, command: SubmitSlotRequestCommand
    ) -> Result[List[Dict[str, Any]]]:
        counts: Dict[str, int] = {}
        for raw_category, amount in (command.requested_slots or {}).items():
            category = self.categories.resolve(raw_category)
            if category is None:
                return Return.err(
                    validation_error(
                        "INVALID_CATEGORY",
                        "requested_slots",
                        f"Invalid category: {raw_category}. "
                        f"Must be one of: {', '.join(self.categories)}",
                    )
                )
            if amount < 0:
                return Return.err(
                    validation_error(
                        "NEGATIVE_AMOUNT",
                        "requested_slots",
                        f"requested_slots.{category} cannot be negative",
                    )
                )
            if amount > 0:
                counts[category] = counts.get(category, 0) + amount

        too_many = self._check_limit(counts, "requested_slots")
        if too_many is not None:
            return Return.err(too_many)

        if not command.slot_assignments:
            return Return.ok(
                [{"category": category} for category, amount in counts.items() for _ in range(amount)]
            )

        records: List[Dict[str, Any]] = []
        for index, assignment in enumerate(command.slot_assignments):
            category = self.categories.resolve(assignment.category)
            if category is None:
                return Return.err(
                    validation_error(
                        "INVALID_CATEGORY",
                        "slot_assignments",
                        f"slot_assignments[{index}].category is invalid: {assignment.category}",
                    )
                )
            record = assignment.model_dump(exclude_none=True)
            record["category"] = category
            records.append(record)

        detail_counts = dict(Counter(r["category"] for r in records))
        too_many = self._check_limit(detail_counts, "slot_assignments")
        if too_many is not None:
            return Return.err(too_many)

        if command.requested_slots is not None:
            if detail_counts != counts:
                return Return.err(
                    validation_error(
                        "SLOT_DETAILS_MISMATCH",
                        "slot_assignments",
                        f"slot_assignments count {detail_counts} does not match "
                        f"requested_slots {counts}",
                    )
                )

        return Return.ok(records)

    def _check_limit(self, counts: Dict[str, int], field: str) -> Optional[Error]:
        for category, amount in counts.items():
            if amount > self.max_slots_per_category:
                return validation_error(
                    "TOO_MANY_SLOTS",
                    field,
                    f"{field}.{category} cannot exceed {self.max_slots_per_category} "
                    "slots per request",
                )
        return None
