"""
Get Quota Use Case

Per-category total/used/available of an account.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.role_policy import can_act_on
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import SystemRole

from .dtos import QuotaSummaryResponse


class GetQuotaUseCase:
    """
    Use case for reading an account's quota.

    Business Rules:
    - Users read their own quota; Super Users also read User accounts;
      Admins read anyone's
    - Unlimited roles report unlimited=True and available=None per category
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog = CategoryCatalog()):
        self.uow = uow
        self.ledger = QuotaLedger(uow, categories)

    async def execute(
        self, actor_id: UUID, actor_role: SystemRole, account_id: UUID
    ) -> Result[QuotaSummaryResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            if not can_act_on(actor_id, actor_role, account.id, account.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot view this account's quota")
                )

            balances = await self.ledger.balances(account)

            return Return.ok(
                QuotaSummaryResponse(
                    account_id=str(account.id),
                    role=account.role.slug,
                    partnership_type=account.partnership_label,
                    unlimited=account.role.has_unlimited_quota,
                    balances=balances,
                )
            )
