"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetAuditEventsUseCase
from src.depends import Identity, get_unit_of_work, require_module

router = APIRouter(prefix="/audit", tags=["Audit"])


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    actor_email: Optional[str]
    account_id: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    """GET /audit/events response payload"""

    events: List[AuditEventResponse]
    next_cursor: Optional[str]


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    identity: Identity = Depends(require_module("system_users")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    account_id: Optional[UUID] = Query(None, description="Only events about this account"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Capacity Audit Events

    Returns quota, template, slot-request, role and setting changes.
    Only accessible by Admins.

    Query Parameters:
        - account_id: Restrict to one account
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Returns:
        - events: List of audit events ordered by newest first
        - next_cursor: Cursor for next page (null if no more events)

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Caller is not an Admin
    """
    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(
        actor_role=identity.role,
        account_id=account_id,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
