"""
SlotRequest Entity

A user's request for additional registration slots.
"""

from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from .enums import SlotRequestStatus


class SlotRequest(SQLModel, table=True):
    """
    SlotRequest entity - request/approval workflow record.

    Business Rules:
    - slot_assignments is the canonical request: one record per slot
      ({"category", "name", "email", "position"}); detail fields are audit
      metadata only
    - requested_slots is always derived from slot_assignments
    - Transitions exactly once: pending -> approved | declined
    - approved_slots is recorded next to the request and never replaces it
    - Never deleted
    """

    __tablename__ = "slot_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    slot_assignments: List[Dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    reason: str = Field(max_length=2000)

    status: SlotRequestStatus = Field(default=SlotRequestStatus.pending)
    approved_slots: Optional[Dict[str, int]] = Field(
        default=None, sa_column=Column(JSON)
    )
    decided_by: Optional[UUID] = Field(default=None)
    decided_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    decision_note: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_slot_request_status", "status"),)

    @property
    def requested_slots(self) -> Dict[str, int]:
        """Per-category counts derived from the assignment records"""
        counts = Counter(record["category"] for record in self.slot_assignments)
        return dict(counts)

    @property
    def is_pending(self) -> bool:
        return self.status == SlotRequestStatus.pending
