"""
Check Capacity Use Case

Asks the configured capacity policy whether an account can take on more
registrations in a category.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.capacity_policy import AdvisoryCapacityPolicy, CapacityPolicy
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.role_policy import can_act_on
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import SystemRole

from .dtos import CapacityCheckResponse


class CheckCapacityUseCase:
    """
    Use case for checking available capacity.

    Business Rules:
    - Unlimited roles are always allowed
    - Whether over-capacity is an error (OVER_CAPACITY) or a warning is the
      policy's decision
    - Nothing is written; consumption (used) is recorded elsewhere
    """

    def __init__(
        self,
        uow: UnitOfWork,
        categories: CategoryCatalog = CategoryCatalog(),
        policy: CapacityPolicy = AdvisoryCapacityPolicy(),
    ):
        self.uow = uow
        self.ledger = QuotaLedger(uow, categories)
        self.policy = policy

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        account_id: UUID,
        category: str,
        requested: int = 1,
    ) -> Result[CapacityCheckResponse]:
        if requested < 1:
            return Return.err(
                validation_error(
                    "NEGATIVE_AMOUNT", "requested", "requested must be at least 1"
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

            if not can_act_on(actor_id, actor_role, account.id, account.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot check this account's capacity")
                )

            available = await self.ledger.get_available(account, category)

        decision = self.policy.evaluate(category, available, requested)
        if not decision.allowed:
            return Return.err(Error("OVER_CAPACITY", decision.warning))

        return Return.ok(
            CapacityCheckResponse(
                account_id=str(account_id),
                category=category,
                requested=requested,
                available=available,
                unlimited=available is None,
                allowed=decision.allowed,
                warning=decision.warning,
                policy=self.policy.name,
            )
        )
