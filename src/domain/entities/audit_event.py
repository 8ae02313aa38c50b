"""
AuditEvent Entity

Immutable log of capacity and authorization changes.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of capacity-affecting actions.

    Business Rules:
    - Immutable (never updated or deleted)
    - actor_id is None for system actions (template cascades)
    - account_id is the account whose capacity or access changed, if any
    - Metadata stores before/after values (requested vs approved slots, etc.)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_id: Optional[UUID] = Field(default=None, index=True)
    account_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "slot_request_approved"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_account_action", "account_id", "action"),
    )
