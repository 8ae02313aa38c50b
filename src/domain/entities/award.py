"""
Award Entity

Recognition record (trophy, certificate) granted to an account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AwardType


class Award(SQLModel, table=True):
    """
    Award entity - unlocks award-gated modules for its account.

    Business Rules:
    - One account may hold several awards of the same type
    - Holding at least one award of a type makes the matching module visible
    """

    __tablename__ = "awards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)
    award_type: AwardType = Field(nullable=False)
    title: Optional[str] = Field(default=None, max_length=255)
    granted_by: Optional[UUID] = Field(default=None)

    awarded_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_award_account_type", "account_id", "award_type"),)
