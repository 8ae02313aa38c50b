from typing import List, Set
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.award_repository import IAwardRepository
from src.domain.entities import Award, AwardType


class AwardRepository(IAwardRepository):
    """Award repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_account(self, account_id: UUID) -> List[Award]:
        """Get all awards of an account, newest first"""
        stmt = (
            select(Award)
            .where(Award.account_id == account_id)
            .order_by(Award.awarded_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_types_by_account(self, account_id: UUID) -> Set[AwardType]:
        """Distinct award types held by an account"""
        stmt = select(Award.award_type).where(Award.account_id == account_id).distinct()
        result = await self.session.exec(stmt)
        return set(result.all())

    async def create(self, award: Award) -> Award:
        """Create a new award"""
        self.session.add(award)
        await self.session.flush()
        await self.session.refresh(award)
        return award
