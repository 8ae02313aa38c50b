"""
List / Get Slot Request Use Cases
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found
from src.app.services.role_policy import can_act_on
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SlotRequestStatus, SystemRole

from .dtos import SlotRequestResponse, SlotRequestsResponse


class ListSlotRequestsUseCase:
    """
    Use case for listing slot requests, newest first.

    Business Rules:
    - Admins see every request
    - Super Users see their own and those of User accounts
    - Users see only their own
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        status: Optional[SlotRequestStatus] = None,
    ) -> Result[SlotRequestsResponse]:
        async with self.uow:
            if actor_role == SystemRole.admin:
                account_ids = None
            elif actor_role == SystemRole.super_user:
                account_ids = await self.uow.accounts.list_ids_by_role(SystemRole.user)
                account_ids.append(actor_id)
            else:
                account_ids = [actor_id]

            requests = await self.uow.slot_requests.list_requests(
                status=status, account_ids=account_ids
            )
            return Return.ok(
                SlotRequestsResponse(
                    requests=[SlotRequestResponse.from_request(r) for r in requests]
                )
            )


class GetSlotRequestUseCase:
    """One slot request, visible to whoever may act on its account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, actor_role: SystemRole, request_id: UUID
    ) -> Result[SlotRequestResponse]:
        async with self.uow:
            slot_request = await self.uow.slot_requests.get_by_id(request_id)
            if slot_request is None:
                return Return.err(not_found("SLOT_REQUEST_NOT_FOUND", "Slot request", request_id))

            account = await self.uow.accounts.get_by_id(slot_request.account_id)
            target_role = account.role if account else SystemRole.user
            if not can_act_on(actor_id, actor_role, slot_request.account_id, target_role):
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You cannot view this slot request")
                )

            return Return.ok(SlotRequestResponse.from_request(slot_request))
