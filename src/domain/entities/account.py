"""
Account Entity

Represents a console user that owns registration capacity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SystemRole

# Partnership type shown for accounts that are not bound to a template
NO_PARTNERSHIP = "N/A"


class Account(SQLModel, table=True):
    """
    Account entity - identity plus role and partnership binding.

    Business Rules:
    - Role changes only through an Admin edit
    - partnership_type_name is None when unbound ("N/A" in the console)
    - Quota lives in quota_entries, written only by the template
      synchronizer, the slot-request workflow or an administrative override
    - Admin and Super User accounts have unlimited capacity and no quota rows
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)

    role: SystemRole = Field(default=SystemRole.user)
    partnership_type_name: Optional[str] = Field(default=None, max_length=255)
    active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_account_partnership_type", "partnership_type_name"),
        Index("idx_account_role", "role"),
    )

    @property
    def partnership_label(self) -> str:
        return self.partnership_type_name or NO_PARTNERSHIP
