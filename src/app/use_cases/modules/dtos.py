"""
Module Access Use Case DTOs (Data Transfer Objects)

All Response classes for the module access domain.
"""

from typing import List, Optional

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class ModuleAccessResponse(BaseModel):
    """Response for check module access use case"""

    module: str
    role: str
    allowed: bool


class ModuleInfo(BaseModel):
    """A module visible in navigation"""

    key: str
    label: str
    description: str
    group: str


class AccessibleModulesResponse(BaseModel):
    """Response for list accessible modules use case"""

    role: str
    modules: List[ModuleInfo]


class ModuleSettingEntry(BaseModel):
    """One cell of the module x role settings matrix"""

    module: str
    role: str
    key: str
    explicit: Optional[bool] = None
    effective: bool
    version: Optional[int] = None


class ModuleSettingsResponse(BaseModel):
    """Response for list module settings use case"""

    settings: List[ModuleSettingEntry]


class ModuleSettingResponse(BaseModel):
    """Response for update module setting use case"""

    key: str
    module: str
    role: str
    enabled: bool
    version: int
