"""
Update Template Use Case

Replaces a template's slots and cascades the new totals to bound accounts.
"""

import logging
from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import not_found
from src.app.services.notification_sink import DomainEvent, NotificationSink, publish_safely
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.template_synchronizer import TemplateSynchronizer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent

from .dtos import TemplateCascadeResponse
from .validation import validate_slots

logger = logging.getLogger(__name__)


class UpdateTemplateUseCase:
    """
    Use case for editing a template.

    Business Rules:
    - The template write is its own transaction
    - Every bound account then gets total[c] = slots[c] for every category,
      regardless of its previous total (overwrite, not delta)
    - Accounts are updated independently; failures are reported per account
    - Template not found -> TEMPLATE_NOT_FOUND, no cascade
    - Publishes template.updated after the cascade
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        notifications: Optional[NotificationSink] = None,
    ):
        self.uow = uow
        self.categories = categories
        self.notifications = notifications
        self.synchronizer = TemplateSynchronizer(uow, QuotaLedger(uow, categories))

    async def execute(
        self, actor_id: Optional[UUID], name: str, slots: Dict[str, int]
    ) -> Result[TemplateCascadeResponse]:
        slots_result = validate_slots(self.categories, slots)
        if slots_result.is_err():
            return slots_result
        new_slots = slots_result.value

        async with self.uow:
            template = await self.uow.templates.get_by_name(name)
            if template is None:
                return Return.err(not_found("TEMPLATE_NOT_FOUND", "Partnership template", name))

            template_name = template.name
            old_slots = dict(template.slots_per_category)
            template.slots_per_category = new_slots
            template.updated_at = datetime.utcnow()
            await self.uow.templates.update(template)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    action="template_updated",
                    event_metadata={
                        "template": template_name,
                        "old_slots": old_slots,
                        "new_slots": new_slots,
                    },
                )
            )

            account_ids = await self.uow.accounts.list_ids_by_partnership_type(template_name)
            await self.uow.commit()

        results = await self.synchronizer.cascade(template_name, account_ids, new_slots)
        response = TemplateCascadeResponse.build(template_name, results)

        await publish_safely(
            self.notifications,
            DomainEvent(
                name="template.updated",
                payload={
                    "template": template_name,
                    "slots_per_category": new_slots,
                    "accounts": len(results),
                    "failed_count": response.failed_count,
                },
            ),
        )
        return Return.ok(response)
