import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.account_repository import AccountRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.award_repository import AwardRepository
from src.adapter.repositories.module_setting_repository import ModuleSettingRepository
from src.adapter.repositories.partnership_template_repository import (
    PartnershipTemplateRepository,
)
from src.adapter.repositories.quota_repository import QuotaRepository
from src.adapter.repositories.slot_request_repository import SlotRequestRepository
from src.app.errors import StorageError
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.quotas = QuotaRepository(self.session)
        self.module_settings = ModuleSettingRepository(self.session)
        self.templates = PartnershipTemplateRepository(self.session)
        self.slot_requests = SlotRequestRepository(self.session)
        self.awards = AwardRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.rollback()
        if isinstance(exc, SQLAlchemyError):
            logger.error("Transaction aborted by storage failure: %s", exc)
            raise StorageError() from exc

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise StorageError() from exc

    async def rollback(self):
        await self.session.rollback()
