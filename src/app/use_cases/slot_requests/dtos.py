"""
Slot Request Use Case DTOs (Data Transfer Objects)

All Request and Response classes for the slot-request workflow.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from src.domain.entities import SlotRequest


# ============================================================================
# Request DTOs
# ============================================================================


class SlotAssignment(BaseModel):
    """One requested slot; name, email and position are audit detail only"""

    category: str
    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    position: Optional[str] = Field(default=None, max_length=255)


class SubmitSlotRequestCommand(BaseModel):
    """
    Request DTO for submitting a slot request.

    Either requested_slots (counts), slot_assignments (one record per slot)
    or both; when both are given their per-category counts must agree.
    """

    requested_slots: Optional[Dict[str, int]] = None
    slot_assignments: Optional[List[SlotAssignment]] = None
    reason: str = Field(default="", max_length=2000)


class ApproveSlotRequestCommand(BaseModel):
    """approved_slots omitted means approve as requested"""

    approved_slots: Optional[Dict[str, int]] = None
    note: Optional[str] = Field(default=None, max_length=2000)


class DeclineSlotRequestCommand(BaseModel):
    note: Optional[str] = Field(default=None, max_length=2000)


# ============================================================================
# Response DTOs
# ============================================================================


class SlotRequestResponse(BaseModel):
    id: str
    account_id: str
    status: str
    reason: str
    requested_slots: Dict[str, int]
    slot_assignments: List[Dict]
    approved_slots: Optional[Dict[str, int]] = None
    decided_by: Optional[str] = None
    decided_at: Optional[str] = None
    decision_note: Optional[str] = None
    created_at: str

    @classmethod
    def from_request(cls, request: SlotRequest) -> "SlotRequestResponse":
        return cls(
            id=str(request.id),
            account_id=str(request.account_id),
            status=request.status.value,
            reason=request.reason,
            requested_slots=request.requested_slots,
            slot_assignments=list(request.slot_assignments),
            approved_slots=request.approved_slots,
            decided_by=str(request.decided_by) if request.decided_by else None,
            decided_at=request.decided_at.isoformat() + "Z" if request.decided_at else None,
            decision_note=request.decision_note,
            created_at=request.created_at.isoformat() + "Z",
        )


class SlotRequestsResponse(BaseModel):
    requests: List[SlotRequestResponse]


class ApprovalResponse(BaseModel):
    """Approved request plus the account's new totals for credited categories"""

    request: SlotRequestResponse
    credited: Dict[str, int]
    new_totals: Dict[str, int]
