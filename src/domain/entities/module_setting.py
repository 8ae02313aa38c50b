"""
ModuleSetting Entity

Sparse per-role enable/disable override of a functional module.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class ModuleSetting(SQLModel, table=True):
    """
    ModuleSetting entity - explicit override keyed by
    ``module_{module}_enabled_for_{role_slug}``.

    Business Rules:
    - Absence of a key defers to the role's default module list
    - Created or updated only through an admin settings edit, never deleted
    - version increases on every edit (optimistic concurrency)
    """

    __tablename__ = "module_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=150)
    enabled: bool = Field(nullable=False)
    version: int = Field(default=1)

    updated_by: Optional[UUID] = Field(default=None)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
