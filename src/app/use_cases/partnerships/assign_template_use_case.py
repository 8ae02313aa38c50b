"""
Assign Template Use Case

Binds an account to a partnership template (or unbinds it).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.notification_sink import DomainEvent, NotificationSink, publish_safely
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.role_policy import can_act_on, can_manage_accounts
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import NO_PARTNERSHIP, AuditEvent, SystemRole

from .dtos import AssignTemplateResponse
from .validation import is_unbind_name


class AssignTemplateUseCase:
    """
    Use case for setting an account's partnership type.

    Business Rules:
    - Totals are overwritten from the template right away; categories the
      template leaves out become 0
    - None or "N/A" clears the binding and zeroes every total
    - Unlimited-role accounts cannot be bound (UNLIMITED_ROLE)
    - Admins assign to anyone, Super Users to User accounts
    - Binding and totals change in one transaction
    - Publishes template.assigned after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        notifications: Optional[NotificationSink] = None,
    ):
        self.uow = uow
        self.ledger = QuotaLedger(uow, categories)
        self.notifications = notifications

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        account_id: UUID,
        name: Optional[str],
    ) -> Result[AssignTemplateResponse]:
        unbind = is_unbind_name(name)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            if not can_manage_accounts(actor_role) or not can_act_on(
                actor_id, actor_role, account.id, account.role
            ):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot change this account's partnership")
                )

            if account.role.has_unlimited_quota:
                return Return.err(
                    validation_error(
                        "UNLIMITED_ROLE",
                        "role",
                        f"{account.role.label} accounts have unlimited capacity "
                        "and cannot be bound to a partnership type",
                    )
                )

            if unbind:
                template_name = None
                slots = {}
            else:
                template = await self.uow.templates.get_by_name(name.strip())
                if template is None:
                    return Return.err(
                        not_found("TEMPLATE_NOT_FOUND", "Partnership template", name)
                    )
                template_name = template.name
                slots = dict(template.slots_per_category)

            old_binding = account.partnership_type_name

            totals_result = await self.ledger.overwrite_totals(account, slots)
            if totals_result.is_err():
                return totals_result

            account.partnership_type_name = template_name
            account.updated_at = datetime.utcnow()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=account.id,
                    action="template_assigned",
                    event_metadata={
                        "old_partnership_type": old_binding,
                        "new_partnership_type": template_name,
                        "totals": totals_result.value,
                    },
                )
            )

            await self.uow.commit()

        response = AssignTemplateResponse(
            account_id=str(account_id),
            partnership_type=template_name or NO_PARTNERSHIP,
            totals=totals_result.value,
        )
        await publish_safely(
            self.notifications,
            DomainEvent(
                name="template.assigned",
                payload={
                    "account_id": str(account_id),
                    "partnership_type": response.partnership_type,
                    "totals": response.totals,
                },
            ),
        )
        return Return.ok(response)
