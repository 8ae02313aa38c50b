"""
Module Access API Routes

Navigation visibility and the module settings matrix.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.modules import (
    AccessibleModulesResponse,
    CheckModuleAccessUseCase,
    ListAccessibleModulesUseCase,
    ListModuleSettingsUseCase,
    ModuleAccessResponse,
    ModuleSettingResponse,
    ModuleSettingsResponse,
    UpdateModuleSettingUseCase,
)
from src.depends import Identity, get_current_identity, get_unit_of_work, require_module

router = APIRouter(prefix="/modules", tags=["Modules"])


class UpdateModuleSettingRequest(BaseModel):
    """PUT /modules/settings request payload"""

    module: str
    role: str
    enabled: bool
    expected_version: Optional[int] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=AccessibleModulesResponse)
async def list_modules(
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Modules visible to the caller, in navigation order.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = ListAccessibleModulesUseCase(uow)
    result = await use_case.execute(identity.account_id, identity.role)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/settings", status_code=status.HTTP_200_OK, response_model=ModuleSettingsResponse
)
async def list_module_settings(
    identity: Identity = Depends(require_module("settings")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Module x role settings matrix with explicit and effective values.

    Raises:
        - 403 Forbidden: settings module disabled or caller not an Admin
    """
    use_case = ListModuleSettingsUseCase(uow)
    result = await use_case.execute(identity.role)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/settings", status_code=status.HTTP_200_OK, response_model=ModuleSettingResponse
)
async def update_module_setting(
    request: UpdateModuleSettingRequest,
    identity: Identity = Depends(require_module("settings")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Enable or disable a module for a role.

    Raises:
        - 400 Bad Request: Unknown module or role, or award-gated module
        - 403 Forbidden: settings module disabled or caller not an Admin
        - 409 Conflict: expected_version does not match the stored version
    """
    use_case = UpdateModuleSettingUseCase(uow)
    result = await use_case.execute(
        actor_id=identity.account_id,
        actor_role=identity.role,
        module=request.module,
        role=request.role,
        enabled=request.enabled,
        expected_version=request.expected_version,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{module}/access", status_code=status.HTTP_200_OK, response_model=ModuleAccessResponse
)
async def check_module_access(
    module: str,
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Whether the caller may use one module.

    Raises:
        - 400 Bad Request: Unknown module
    """
    use_case = CheckModuleAccessUseCase(uow)
    result = await use_case.execute(identity.account_id, identity.role, module)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
