from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account, SystemRole


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_ids_by_partnership_type(self, name: str) -> List[UUID]:
        """IDs of all accounts bound to a partnership template"""
        stmt = (
            select(Account.id)
            .where(Account.partnership_type_name == name)
            .order_by(Account.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_ids_by_role(self, role: SystemRole) -> List[UUID]:
        """IDs of all accounts holding a system role"""
        stmt = select(Account.id).where(Account.role == role)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
