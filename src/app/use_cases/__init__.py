"""
Use Cases - Backward Compatibility Shim

All use cases have been organized into domain folders:
- modules/: Module access and settings
- accounts/: Quota, capacity, roles and awards
- partnerships/: Partnership templates and their cascade
- slot_requests/: Slot request workflow
- audit/: Audit logs

Import from subdirectories for better organization.
"""

# Re-export everything for backward compatibility
from .modules import (
    CheckModuleAccessUseCase,
    ListAccessibleModulesUseCase,
    ListModuleSettingsUseCase,
    UpdateModuleSettingUseCase,
)
from .accounts import (
    ChangeRoleUseCase,
    CheckCapacityUseCase,
    GetQuotaUseCase,
    GrantAwardUseCase,
    ListAwardsUseCase,
    OverrideQuotaUseCase,
)
from .partnerships import (
    AssignTemplateUseCase,
    CreateTemplateUseCase,
    DeleteTemplateUseCase,
    GetTemplateUseCase,
    ListTemplatesUseCase,
    ResyncTemplateUseCase,
    UpdateTemplateUseCase,
)
from .slot_requests import (
    ApproveSlotRequestUseCase,
    DeclineSlotRequestUseCase,
    GetSlotRequestUseCase,
    ListSlotRequestsUseCase,
    SubmitSlotRequestUseCase,
)
from .audit import (
    GetAuditEventsUseCase,
)

__all__ = [
    # Modules
    "CheckModuleAccessUseCase",
    "ListAccessibleModulesUseCase",
    "ListModuleSettingsUseCase",
    "UpdateModuleSettingUseCase",
    # Accounts
    "ChangeRoleUseCase",
    "CheckCapacityUseCase",
    "GetQuotaUseCase",
    "GrantAwardUseCase",
    "ListAwardsUseCase",
    "OverrideQuotaUseCase",
    # Partnerships
    "AssignTemplateUseCase",
    "CreateTemplateUseCase",
    "DeleteTemplateUseCase",
    "GetTemplateUseCase",
    "ListTemplatesUseCase",
    "ResyncTemplateUseCase",
    "UpdateTemplateUseCase",
    # Slot requests
    "ApproveSlotRequestUseCase",
    "DeclineSlotRequestUseCase",
    "GetSlotRequestUseCase",
    "ListSlotRequestsUseCase",
    "SubmitSlotRequestUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
