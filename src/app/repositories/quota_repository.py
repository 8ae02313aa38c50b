from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import QuotaEntry


class IQuotaRepository(ABC):
    """Quota ledger repository interface - application layer"""

    @abstractmethod
    async def get(self, account_id: UUID, category: str) -> Optional[QuotaEntry]:
        """Get the ledger row of an account for a category"""
        pass

    @abstractmethod
    async def get_for_update(
        self, account_id: UUID, category: str
    ) -> Optional[QuotaEntry]:
        """Get the ledger row, locking it for the rest of the transaction"""
        pass

    @abstractmethod
    async def list_by_account(self, account_id: UUID) -> List[QuotaEntry]:
        """Get all ledger rows of an account"""
        pass

    @abstractmethod
    async def save(self, entry: QuotaEntry) -> QuotaEntry:
        """Insert or update a ledger row"""
        pass

    @abstractmethod
    async def delete_by_account(self, account_id: UUID) -> int:
        """Delete all ledger rows of an account, returns the number deleted"""
        pass
