from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import PartnershipTemplate


class IPartnershipTemplateRepository(ABC):
    """Partnership template repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[PartnershipTemplate]:
        """Get template by its unique name"""
        pass

    @abstractmethod
    async def list_all(self) -> List[PartnershipTemplate]:
        """Get all templates, newest first"""
        pass

    @abstractmethod
    async def create(self, template: PartnershipTemplate) -> PartnershipTemplate:
        """Create a new template"""
        pass

    @abstractmethod
    async def update(self, template: PartnershipTemplate) -> PartnershipTemplate:
        """Update existing template"""
        pass

    @abstractmethod
    async def delete(self, template: PartnershipTemplate) -> None:
        """Delete a template"""
        pass
