"""
Account Use Case DTOs (Data Transfer Objects)

All Response classes for the account capacity domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.services.quota_ledger import QuotaBalance


# ============================================================================
# Response DTOs
# ============================================================================


class QuotaSummaryResponse(BaseModel):
    """Response for get quota use case ("My Access")"""

    account_id: str
    role: str
    partnership_type: str
    unlimited: bool
    balances: List[QuotaBalance]


class QuotaEntryResponse(BaseModel):
    """Response for override quota use case"""

    account_id: str
    category: str
    total: int
    used: int
    available: int


class CapacityCheckResponse(BaseModel):
    """Response for check capacity use case"""

    account_id: str
    category: str
    requested: int
    available: Optional[int] = None
    unlimited: bool
    allowed: bool
    warning: Optional[str] = None
    policy: str


class ChangeRoleResponse(BaseModel):
    """Response for change role use case"""

    account_id: str
    old_role: str
    new_role: str
    quota_cleared: bool


class AwardResponse(BaseModel):
    """A single award"""

    id: str
    account_id: str
    award_type: str
    title: Optional[str] = None
    awarded_at: str


class AwardsResponse(BaseModel):
    """Response for list awards use case"""

    awards: List[AwardResponse]
