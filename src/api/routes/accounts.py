"""
Account API Routes

Quota, capacity, partnership binding, role and awards of an account.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.capacity_policy import CapacityPolicy
from src.app.services.notification_sink import NotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import (
    AwardResponse,
    AwardsResponse,
    CapacityCheckResponse,
    ChangeRoleResponse,
    ChangeRoleUseCase,
    CheckCapacityUseCase,
    GetQuotaUseCase,
    GrantAwardUseCase,
    ListAwardsUseCase,
    OverrideQuotaUseCase,
    QuotaEntryResponse,
    QuotaSummaryResponse,
)
from src.app.use_cases.partnerships import (
    AssignTemplateCommand,
    AssignTemplateResponse,
    AssignTemplateUseCase,
)
from src.domain.categories import CategoryCatalog
from src.depends import (
    Identity,
    get_capacity_policy,
    get_categories,
    get_notification_sink,
    get_unit_of_work,
    require_module,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])

# Users reach their own figures through "My Access", managers through "System Users"
own_or_managed = require_module("access_levels", "system_users")


class OverrideQuotaRequest(BaseModel):
    """PUT /accounts/{id}/quota/{category} request payload"""

    total: Optional[int] = None
    used: Optional[int] = None


class ChangeRoleRequest(BaseModel):
    """PUT /accounts/{id}/role request payload"""

    role: str = Field(..., description="Admin, Super User or User")


class GrantAwardRequest(BaseModel):
    """POST /accounts/{id}/awards request payload"""

    award_type: str = Field(..., description="trophy or certificate")
    title: Optional[str] = Field(default=None, max_length=255)


@router.get(
    "/{account_id}/quota", status_code=status.HTTP_200_OK, response_model=QuotaSummaryResponse
)
async def get_quota(
    account_id: UUID,
    identity: Identity = Depends(own_or_managed),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
):
    """
    Per-category total, used and available of an account.

    Raises:
        - 403 Forbidden: Caller may not act on this account
        - 404 Not Found: Unknown account
    """
    use_case = GetQuotaUseCase(uow, categories)
    result = await use_case.execute(identity.account_id, identity.role, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{account_id}/quota/{category}",
    status_code=status.HTTP_200_OK,
    response_model=QuotaEntryResponse,
)
async def override_quota(
    account_id: UUID,
    category: str,
    request: OverrideQuotaRequest,
    identity: Identity = Depends(require_module("system_users")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
):
    """
    Administrative override of total and/or used for one category.

    Raises:
        - 400 Bad Request: Negative values, unknown category, unlimited role
        - 403 Forbidden: Caller may not manage this account
        - 404 Not Found: Unknown account
    """
    use_case = OverrideQuotaUseCase(uow, categories)
    result = await use_case.execute(
        identity.account_id,
        identity.role,
        account_id,
        category,
        total=request.total,
        used=request.used,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{account_id}/capacity/{category}",
    status_code=status.HTTP_200_OK,
    response_model=CapacityCheckResponse,
)
async def check_capacity(
    account_id: UUID,
    category: str,
    requested: int = Query(1, ge=1, description="Registrations about to be added"),
    identity: Identity = Depends(own_or_managed),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    policy: CapacityPolicy = Depends(get_capacity_policy),
):
    """
    Whether the account can take ``requested`` more registrations.

    Under the strict policy a refusal is reported as 403 OVER_CAPACITY;
    under the advisory policy it is allowed with a warning.
    """
    use_case = CheckCapacityUseCase(uow, categories, policy)
    result = await use_case.execute(
        identity.account_id, identity.role, account_id, category, requested
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{account_id}/partnership",
    status_code=status.HTTP_200_OK,
    response_model=AssignTemplateResponse,
)
async def assign_partnership(
    account_id: UUID,
    request: AssignTemplateCommand,
    identity: Identity = Depends(require_module("system_users")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    notifications: NotificationSink = Depends(get_notification_sink),
):
    """
    Bind the account to a partnership template, or unbind it with "N/A".

    Raises:
        - 400 Bad Request: Account has an unlimited role
        - 404 Not Found: Unknown account or template
    """
    use_case = AssignTemplateUseCase(uow, categories, notifications)
    result = await use_case.execute(
        identity.account_id, identity.role, account_id, request.partnership_type
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{account_id}/role", status_code=status.HTTP_200_OK, response_model=ChangeRoleResponse
)
async def change_role(
    account_id: UUID,
    request: ChangeRoleRequest,
    identity: Identity = Depends(require_module("system_users")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
):
    """
    Change an account's system role (Admin only).

    Raises:
        - 400 Bad Request: Unknown role
        - 403 Forbidden: Caller is not an Admin
        - 409 Conflict: Admin demoting themselves
    """
    use_case = ChangeRoleUseCase(uow, categories)
    result = await use_case.execute(
        identity.account_id, identity.role, account_id, request.role
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{account_id}/awards", status_code=status.HTTP_201_CREATED, response_model=AwardResponse
)
async def grant_award(
    account_id: UUID,
    request: GrantAwardRequest,
    identity: Identity = Depends(require_module("system_users")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Grant a trophy or certificate (Admin only)"""
    use_case = GrantAwardUseCase(uow)
    result = await use_case.execute(
        identity.account_id, identity.role, account_id, request.award_type, request.title
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{account_id}/awards", status_code=status.HTTP_200_OK, response_model=AwardsResponse
)
async def list_awards(
    account_id: UUID,
    identity: Identity = Depends(own_or_managed),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAwardsUseCase(uow)
    result = await use_case.execute(identity.account_id, identity.role, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
