from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import ModuleSetting


class IModuleSettingRepository(ABC):
    """Module setting repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[ModuleSetting]:
        """Get every stored module setting"""
        pass

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[ModuleSetting]:
        """Get a module setting by its key"""
        pass

    @abstractmethod
    async def save(self, setting: ModuleSetting) -> ModuleSetting:
        """Insert or update a module setting"""
        pass
