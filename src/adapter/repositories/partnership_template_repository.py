from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.partnership_template_repository import (
    IPartnershipTemplateRepository,
)
from src.domain.entities import PartnershipTemplate


class PartnershipTemplateRepository(IPartnershipTemplateRepository):
    """Partnership template repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[PartnershipTemplate]:
        """Get template by its unique name"""
        stmt = select(PartnershipTemplate).where(PartnershipTemplate.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[PartnershipTemplate]:
        """Get all templates ordered by name"""
        stmt = select(PartnershipTemplate).order_by(PartnershipTemplate.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, template: PartnershipTemplate) -> PartnershipTemplate:
        """Create a new template"""
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def update(self, template: PartnershipTemplate) -> PartnershipTemplate:
        """Update existing template"""
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def delete(self, template: PartnershipTemplate) -> None:
        """Delete a template"""
        await self.session.delete(template)
        await self.session.flush()
