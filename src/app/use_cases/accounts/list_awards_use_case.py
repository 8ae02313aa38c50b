"""
List Awards Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found
from src.app.services.role_policy import can_act_on
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SystemRole

from .dtos import AwardsResponse
from .grant_award_use_case import award_response


class ListAwardsUseCase:
    """Awards of an account, newest first; visible to whoever may act on it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, actor_role: SystemRole, account_id: UUID
    ) -> Result[AwardsResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            if not can_act_on(actor_id, actor_role, account.id, account.role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot view this account's awards")
                )

            awards = await self.uow.awards.list_by_account(account.id)
            return Return.ok(AwardsResponse(awards=[award_response(a) for a in awards]))
