"""
Partnership Template Use Case DTOs (Data Transfer Objects)

All Request and Response classes for partnership templates.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.app.services.template_synchronizer import AccountSyncResult
from src.domain.entities import PartnershipTemplate


# ============================================================================
# Request DTOs
# ============================================================================


class TemplateCommand(BaseModel):
    """Request DTO for creating a template"""

    name: str = Field(..., max_length=255)
    slots_per_category: Dict[str, int] = Field(default_factory=dict)


class TemplateSlotsCommand(BaseModel):
    """Request DTO for replacing a template's slots"""

    slots_per_category: Dict[str, int]


class AssignTemplateCommand(BaseModel):
    """Request DTO for binding an account; None or "N/A" unbinds"""

    partnership_type: Optional[str] = None


class ResyncCommand(BaseModel):
    """Request DTO for re-applying a template; None means every bound account"""

    account_ids: Optional[List[str]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class TemplateResponse(BaseModel):
    name: str
    slots_per_category: Dict[str, int]
    created_at: str
    updated_at: Optional[str] = None
    bound_accounts: Optional[int] = None

    @classmethod
    def from_template(
        cls, template: PartnershipTemplate, bound_accounts: Optional[int] = None
    ) -> "TemplateResponse":
        return cls(
            name=template.name,
            slots_per_category=dict(template.slots_per_category),
            created_at=template.created_at.isoformat() + "Z",
            updated_at=template.updated_at.isoformat() + "Z" if template.updated_at else None,
            bound_accounts=bound_accounts,
        )


class TemplatesResponse(BaseModel):
    templates: List[TemplateResponse]


class TemplateCascadeResponse(BaseModel):
    """
    Result of a template change and its cascade.

    The operation succeeded even when failed_count > 0; failed accounts are
    listed in results and can be retried with a resync.
    """

    template: str
    results: List[AccountSyncResult]
    failed_count: int

    @classmethod
    def build(cls, template: str, results: List[AccountSyncResult]) -> "TemplateCascadeResponse":
        return cls(
            template=template,
            results=results,
            failed_count=sum(1 for r in results if r.status == "failed"),
        )


class AssignTemplateResponse(BaseModel):
    account_id: str
    partnership_type: str
    totals: Dict[str, int]
