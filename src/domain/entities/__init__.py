"""
Capacity Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AwardType,
    SlotRequestStatus,
    SystemRole,
)

# Export all entities
from .account import NO_PARTNERSHIP, Account
from .quota_entry import QuotaEntry
from .module_setting import ModuleSetting
from .partnership_template import PartnershipTemplate
from .slot_request import SlotRequest
from .award import Award
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AwardType",
    "SlotRequestStatus",
    "SystemRole",
    # Entities
    "NO_PARTNERSHIP",
    "Account",
    "QuotaEntry",
    "ModuleSetting",
    "PartnershipTemplate",
    "SlotRequest",
    "Award",
    "AuditEvent",
]
