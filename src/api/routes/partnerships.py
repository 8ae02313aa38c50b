"""
Partnership Template API Routes

Template management; edits and deletes cascade to bound accounts.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, raise_for_error
from src.app.errors import validation_error
from src.app.services.notification_sink import NotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.partnerships import (
    CreateTemplateUseCase,
    DeleteTemplateUseCase,
    GetTemplateUseCase,
    ListTemplatesUseCase,
    ResyncCommand,
    ResyncTemplateUseCase,
    TemplateCascadeResponse,
    TemplateCommand,
    TemplateResponse,
    TemplateSlotsCommand,
    TemplatesResponse,
    UpdateTemplateUseCase,
)
from src.domain.categories import CategoryCatalog
from src.depends import (
    Identity,
    get_categories,
    get_notification_sink,
    get_unit_of_work,
    require_module,
)

router = APIRouter(prefix="/partnerships", tags=["Partnerships"])

partnership_management = require_module("partnership_management")


@router.get("", status_code=status.HTTP_200_OK, response_model=TemplatesResponse)
async def list_templates(
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListTemplatesUseCase(uow)
    result = await use_case.execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TemplateResponse)
async def create_template(
    request: TemplateCommand,
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
):
    """
    Create a partnership template.

    Raises:
        - 400 Bad Request: Empty or "N/A" name, unknown category, negative slots
        - 409 Conflict: Template name already taken
    """
    use_case = CreateTemplateUseCase(uow, categories)
    result = await use_case.execute(
        identity.account_id, request.name, request.slots_per_category
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{name}", status_code=status.HTTP_200_OK, response_model=TemplateResponse)
async def get_template(
    name: str,
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetTemplateUseCase(uow)
    result = await use_case.execute(name)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{name}", status_code=status.HTTP_200_OK, response_model=TemplateCascadeResponse)
async def update_template(
    name: str,
    request: TemplateSlotsCommand,
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    notifications: NotificationSink = Depends(get_notification_sink),
):
    """
    Replace a template's slots and overwrite every bound account's totals.

    A 200 response may still carry per-account failures (failed_count > 0);
    retry them with POST /partnerships/{name}/resync.

    Raises:
        - 400 Bad Request: Unknown category, negative slots
        - 404 Not Found: Unknown template
    """
    use_case = UpdateTemplateUseCase(uow, categories, notifications)
    result = await use_case.execute(identity.account_id, name, request.slots_per_category)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{name}", status_code=status.HTTP_200_OK, response_model=TemplateCascadeResponse
)
async def delete_template(
    name: str,
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
    notifications: NotificationSink = Depends(get_notification_sink),
):
    """
    Delete a template; bound accounts drop to zero capacity and "N/A".

    Accounts listed as failed can be retried with POST /partnerships/{name}/resync.

    Raises:
        - 404 Not Found: Unknown template
    """
    use_case = DeleteTemplateUseCase(uow, categories, notifications)
    result = await use_case.execute(identity.account_id, name)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{name}/resync", status_code=status.HTTP_200_OK, response_model=TemplateCascadeResponse
)
async def resync_template(
    name: str,
    request: ResyncCommand,
    identity: Identity = Depends(partnership_management),
    uow: UnitOfWork = Depends(get_unit_of_work),
    categories: CategoryCatalog = Depends(get_categories),
):
    """
    Re-apply a template to its bound accounts, or to the listed ones.

    After a delete whose cascade failed for some accounts, resyncing the
    deleted name zeroes and unbinds the accounts still bound to it.

    Raises:
        - 404 Not Found: Unknown template and no account bound to the name
    """
    account_ids = None
    if request.account_ids is not None:
        try:
            account_ids = [UUID(a) for a in request.account_ids]
        except ValueError:
            raise ClientError(
                validation_error("INVALID_ACCOUNT_ID", "account_ids", "account_ids must be UUIDs")
            ) from None

    use_case = ResyncTemplateUseCase(uow, categories)
    result = await use_case.execute(name, account_ids)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
