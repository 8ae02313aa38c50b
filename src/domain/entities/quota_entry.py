"""
QuotaEntry Entity

One ledger row per (account, category).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class QuotaEntry(SQLModel, table=True):
    """
    QuotaEntry entity - capacity counters of one account for one category.

    Business Rules:
    - total >= 0 (enforced by the ledger and by a check constraint)
    - used is maintained by the attendee-consumption process and may exceed total
    - available = total - used is derived, never stored
    """

    __tablename__ = "quota_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)
    category: str = Field(max_length=50, nullable=False)

    total: int = Field(default=0)
    used: int = Field(default=0)

    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_quota_account_category", "account_id", "category", unique=True),
        CheckConstraint("total >= 0", name="ck_quota_total_non_negative"),
    )

    @property
    def available(self) -> int:
        return self.total - self.used
