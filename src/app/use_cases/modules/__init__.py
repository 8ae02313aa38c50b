"""
Module Access Use Cases

Module visibility and module settings.
"""

from .check_module_access_use_case import CheckModuleAccessUseCase
from .dtos import (
    AccessibleModulesResponse,
    ModuleAccessResponse,
    ModuleInfo,
    ModuleSettingEntry,
    ModuleSettingResponse,
    ModuleSettingsResponse,
)
from .list_accessible_modules_use_case import ListAccessibleModulesUseCase
from .list_module_settings_use_case import ListModuleSettingsUseCase
from .update_module_setting_use_case import UpdateModuleSettingUseCase

__all__ = [
    "CheckModuleAccessUseCase",
    "ListAccessibleModulesUseCase",
    "ListModuleSettingsUseCase",
    "UpdateModuleSettingUseCase",
    "AccessibleModulesResponse",
    "ModuleAccessResponse",
    "ModuleInfo",
    "ModuleSettingEntry",
    "ModuleSettingResponse",
    "ModuleSettingsResponse",
]
