from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from libs.result import Error
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.notification_sink import HttpNotificationSink, LoggingNotificationSink
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import read_identity_claims
from src.app.services.capacity_policy import CapacityPolicy, build_capacity_policy
from src.app.services.module_access import can_access, load_access_context
from src.app.services.notification_sink import NotificationSink
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import SystemRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

categories = CategoryCatalog(ApplicationConfig.ATTENDEE_CATEGORIES)
capacity_policy = build_capacity_policy(ApplicationConfig.CAPACITY_POLICY)


class Identity(BaseModel):
    """Caller as supplied by the identity provider's token"""

    account_id: UUID
    role: SystemRole


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_categories() -> CategoryCatalog:
    return categories


def get_capacity_policy() -> CapacityPolicy:
    return capacity_policy


def get_max_slots_per_category() -> int:
    return ApplicationConfig.MAX_SLOTS_PER_CATEGORY


def get_notification_sink() -> Optional[NotificationSink]:
    if ApplicationConfig.NOTIFICATION_WEBHOOK_URL:
        return HttpNotificationSink(
            ApplicationConfig.NOTIFICATION_WEBHOOK_URL,
            timeout=ApplicationConfig.NOTIFICATION_TIMEOUT_SECONDS,
        )
    return LoggingNotificationSink()


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> Identity:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Identity with account_id and role

    Raises:
        HTTPException: 401 if token is invalid, expired or names no known role
    """
    claims = read_identity_claims(credentials.credentials)

    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    account_id, role = claims
    return Identity(account_id=account_id, role=role)


def require_module(*module_keys: str):
    """
    Dependency factory gating a route on module access.

    The caller passes when any of ``module_keys`` is accessible to its role
    (settings and awards taken into account); otherwise 403 MODULE_DISABLED.
    """

    async def dependency(
        identity: Identity = Depends(get_current_identity),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ) -> Identity:
        async with uow:
            snapshot, award_types = await load_access_context(uow, identity.account_id)

        if not any(can_access(identity.role, key, snapshot, award_types) for key in module_keys):
            raise ClientError(
                Error(
                    "MODULE_DISABLED",
                    f"Module {' / '.join(module_keys)} is not available to {identity.role.label}",
                ),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return identity

    return dependency
