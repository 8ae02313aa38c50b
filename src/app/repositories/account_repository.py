from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Account, SystemRole


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def list_ids_by_partnership_type(self, name: str) -> List[UUID]:
        """IDs of all accounts bound to a partnership template"""
        pass

    @abstractmethod
    async def list_ids_by_role(self, role: SystemRole) -> List[UUID]:
        """IDs of all accounts holding a system role"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
