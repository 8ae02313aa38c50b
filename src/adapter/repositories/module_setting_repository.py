from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.module_setting_repository import IModuleSettingRepository
from src.domain.entities import ModuleSetting


class ModuleSettingRepository(IModuleSettingRepository):
    """Module setting repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[ModuleSetting]:
        """Get every explicit module setting"""
        result = await self.session.exec(select(ModuleSetting))
        return list(result.all())

    async def get_by_key(self, key: str) -> Optional[ModuleSetting]:
        """Get module setting by key"""
        stmt = select(ModuleSetting).where(ModuleSetting.key == key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, setting: ModuleSetting) -> ModuleSetting:
        """Insert or update a module setting"""
        self.session.add(setting)
        await self.session.flush()
        await self.session.refresh(setting)
        return setting
