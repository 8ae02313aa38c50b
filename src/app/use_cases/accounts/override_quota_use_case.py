"""
Override Quota Use Case

Administrative edit of an account's total and/or used count for one category.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.role_policy import can_act_on, can_manage_accounts
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent, SystemRole

from .dtos import QuotaEntryResponse


class OverrideQuotaUseCase:
    """
    Use case for the administrative quota override.

    Business Rules:
    - Admins override anyone, Super Users only User accounts
    - Users cannot override, not even their own quota
    - total and used must be >= 0; at least one of them is required
    - The override is overwritten by the next template cascade for
      templated accounts
    - Creates audit event with old and new figures
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog = CategoryCatalog()):
        self.uow = uow
        self.ledger = QuotaLedger(uow, categories)

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        account_id: UUID,
        category: str,
        total: Optional[int] = None,
        used: Optional[int] = None,
    ) -> Result[QuotaEntryResponse]:
        if total is None and used is None:
            return Return.err(
                validation_error(
                    "EMPTY_OVERRIDE", "total", "Either total or used must be provided"
                )
            )

        resolved = self.ledger.resolve_category(category)
        if resolved.is_err():
            return resolved
        category = resolved.value

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            if not can_manage_accounts(actor_role) or not can_act_on(
                actor_id, actor_role, account.id, account.role
            ):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot change this account's quota")
                )

            old_total = await self.ledger.get_total(account, category)
            old_used = await self.ledger.get_used(account, category)

            result = await self.ledger.set_entry(account, category, total=total, used=used)
            if result.is_err():
                return result
            entry = result.value

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=account.id,
                    action="quota_overridden",
                    event_metadata={
                        "category": category,
                        "old_total": old_total,
                        "new_total": entry.total,
                        "old_used": old_used,
                        "new_used": entry.used,
                    },
                )
            )

            await self.uow.commit()

            return Return.ok(
                QuotaEntryResponse(
                    account_id=str(account.id),
                    category=category,
                    total=entry.total,
                    used=entry.used,
                    available=entry.available,
                )
            )
