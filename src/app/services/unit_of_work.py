from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.award_repository import IAwardRepository
from src.app.repositories.module_setting_repository import IModuleSettingRepository
from src.app.repositories.partnership_template_repository import (
    IPartnershipTemplateRepository,
)
from src.app.repositories.quota_repository import IQuotaRepository
from src.app.repositories.slot_request_repository import ISlotRequestRepository


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - defines repository access and transaction management.

    One ``async with uow:`` block is one transaction: work is kept only if
    ``commit()`` is awaited inside the block, leaving the block rolls back
    anything uncommitted. A unit of work may be entered again afterwards to
    run the next, independent transaction.
    """

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    quotas: IQuotaRepository
    module_settings: IModuleSettingRepository
    templates: IPartnershipTemplateRepository
    slot_requests: ISlotRequestRepository
    awards: IAwardRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
