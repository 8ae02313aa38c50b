"""
PartnershipTemplate Entity

Named capacity definition shared by the accounts bound to it.
"""

from datetime import datetime
from typing import Dict, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel


class PartnershipTemplate(SQLModel, table=True):
    """
    PartnershipTemplate entity - per-category slot allocation.

    Business Rules:
    - name is unique and is what accounts reference
    - The template is the single source of truth for bound accounts' totals
    - Deleting a template zeroes bound accounts, it never deletes them
    """

    __tablename__ = "partnership_templates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)
    slots_per_category: Dict[str, int] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    def slots_for(self, category: str) -> int:
        return int(self.slots_per_category.get(category, 0))
