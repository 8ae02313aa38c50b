from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.quota_repository import IQuotaRepository
from src.domain.entities import QuotaEntry


class QuotaRepository(IQuotaRepository):
    """Quota ledger repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, account_id: UUID, category: str) -> Optional[QuotaEntry]:
        """Get the ledger row of one account and category"""
        stmt = select(QuotaEntry).where(
            QuotaEntry.account_id == account_id, QuotaEntry.category == category
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_for_update(self, account_id: UUID, category: str) -> Optional[QuotaEntry]:
        """Get the ledger row locked for the rest of the transaction"""
        stmt = (
            select(QuotaEntry)
            .where(QuotaEntry.account_id == account_id, QuotaEntry.category == category)
            .with_for_update()
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_account(self, account_id: UUID) -> List[QuotaEntry]:
        """Get all ledger rows of an account"""
        stmt = select(QuotaEntry).where(QuotaEntry.account_id == account_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def save(self, entry: QuotaEntry) -> QuotaEntry:
        """Insert or update a ledger row"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete_by_account(self, account_id: UUID) -> int:
        """Delete all ledger rows of an account, returning how many were removed"""
        stmt = delete(QuotaEntry).where(QuotaEntry.account_id == account_id)
        result = await self.session.execute(stmt)
        return result.rowcount or 0
