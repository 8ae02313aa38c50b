"""
Slot Request API Routes

Submission and the approve/decline workflow for extra registration slots.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.notification_sink import NotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.slot_requests import (
    ApprovalResponse,
    ApproveSlotRequestCommand,
    ApproveSlotRequestUseCase,
    DeclineSlotRequestCommand,
    DeclineSlotRequestUseCase,
    GetSlotRequestUseCase,
    ListSlotRequestsUseCase,
    SlotRequestResponse,
    SlotRequestsResponse,
    SubmitSlotRequestCommand,
    SubmitSlotRequestUseCase,
)
from src.domain.categories import CategoryCatalog
from src.domain.entities import SlotRequestStatus
from src.depends import (
    Identity,
    get_categories,
    get_max_slots_per_category,
    get_notification_sink,
    get_unit_of_work,
    require_module,
)

router = APIRouter(prefix="/slot-requests", tags=["Slot Requests"])

requests_module = require_module("requests")
requests_or_own = require_module("requests", "access_levels")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SlotRequestResponse)
async def submit_slot_request(
    request: SubmitSlotRequestCommand,
    identity: Identity = Depends(require_module("access_levels")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    notifications: NotificationSink = Depends(get_notification_sink),
    max_slots_per_category: int = Depends(get_max_slots_per_category),
):
    """
    Ask for more registration slots.

    Raises:
        - 400 Bad Request: Empty reason, nothing requested, negative counts,
          more than MAX_SLOTS_PER_CATEGORY in a category, unknown category,
          counts and details disagree, unlimited role
        - 403 Forbidden: access_levels module disabled or account inactive
    """
    use_case = SubmitSlotRequestUseCase(
        uow, categories, notifications, max_slots_per_category=max_slots_per_category
    )
    result = await use_case.execute(identity.account_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=SlotRequestsResponse)
async def list_slot_requests(
    status_filter: Optional[SlotRequestStatus] = Query(None, alias="status"),
    identity: Identity = Depends(requests_or_own),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Slot requests visible to the caller, newest first"""
    use_case = ListSlotRequestsUseCase(uow)
    result = await use_case.execute(identity.account_id, identity.role, status_filter)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{request_id}", status_code=status.HTTP_200_OK, response_model=SlotRequestResponse)
async def get_slot_request(
    request_id: UUID,
    identity: Identity = Depends(requests_or_own),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetSlotRequestUseCase(uow)
    result = await use_case.execute(identity.account_id, identity.role, request_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{request_id}/approve", status_code=status.HTTP_200_OK, response_model=ApprovalResponse
)
async def approve_slot_request(
    request_id: UUID,
    request: ApproveSlotRequestCommand,
    identity: Identity = Depends(requests_module),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    notifications: NotificationSink = Depends(get_notification_sink),
):
    """
    Approve a pending request, fully or partially.

    Omit approved_slots to approve exactly what was requested.

    Raises:
        - 400 Bad Request: Approved amount exceeds requested, nothing approved
        - 404 Not Found: Unknown request
        - 409 Conflict: Request already approved or declined
    """
    use_case = ApproveSlotRequestUseCase(uow, categories, notifications)
    result = await use_case.execute(
        identity.account_id,
        identity.role,
        request_id,
        approved_amounts=request.approved_slots,
        note=request.note,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{request_id}/decline", status_code=status.HTTP_200_OK, response_model=SlotRequestResponse
)
async def decline_slot_request(
    request_id: UUID,
    request: DeclineSlotRequestCommand,
    identity: Identity = Depends(requests_module),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifications: NotificationSink = Depends(get_notification_sink),
):
    """
    Decline a pending request; the ledger is untouched.

    Raises:
        - 404 Not Found: Unknown request
        - 409 Conflict: Request already approved or declined
    """
    use_case = DeclineSlotRequestUseCase(uow, notifications)
    result = await use_case.execute(
        identity.account_id, identity.role, request_id, note=request.note
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
