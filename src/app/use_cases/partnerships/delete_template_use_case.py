"""
Delete Template Use Case

Removes a template and revokes the capacity it granted.
"""

from typing import Optional
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


class DeleteTemplateUseCase:
    """
    Use case for deleting a template.

    Business Rules:
    - Bound accounts keep existing: every category total goes to 0 and the
      binding is cleared ("N/A")
    - The template delete is its own transaction, each account another
    - Template not found -> TEMPLATE_NOT_FOUND, no cascade
    - Publishes template.deleted after the cascade
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        notifications: Optional[NotificationSink] = None,
    ):
        self.uow = uow
        self.notifications = notifications
        self.synchronizer = TemplateSynchronizer(uow, QuotaLedger(uow, categories))

    async def execute(
        self, actor_id: Optional[UUID], name: str
    ) -> Result[TemplateCascadeResponse]:
        async with self.uow:
            template = await self.uow.templates.get_by_name(name)
            if template is None:
                return Return.err(not_found("TEMPLATE_NOT_FOUND", "Partnership template", name))

            template_name = template.name
            account_ids = await self.uow.accounts.list_ids_by_partnership_type(template_name)
            await self.uow.templates.delete(template)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    action="template_deleted",
                    event_metadata={"template": template_name, "bound_accounts": len(account_ids)},
                )
            )

            await self.uow.commit()

        results = await self.synchronizer.cascade(
            template_name, account_ids, {}, unbind=True, action="template_revoked"
        )
        response = TemplateCascadeResponse.build(template_name, results)

        await publish_safely(
            self.notifications,
            DomainEvent(
                name="template.deleted",
                payload={
                    "template": template_name,
                    "accounts": len(results),
                    "failed_count": response.failed_count,
                },
            ),
        )
        return Return.ok(response)
