from abc import ABC, abstractmethod
from typing import List, Set
from uuid import UUID

from src.domain.entities import Award, AwardType


class IAwardRepository(ABC):
    """Award repository interface - application layer"""

    @abstractmethod
    async def list_by_account(self, account_id: UUID) -> List[Award]:
        """Get all awards of an account, newest first"""
        pass

    @abstractmethod
    async def get_types_by_account(self, account_id: UUID) -> Set[AwardType]:
        """Award types the account holds at least one record of"""
        pass

    @abstractmethod
    async def create(self, award: Award) -> Award:
        """Create a new award"""
        pass
