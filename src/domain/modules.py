"""
Module Registry

Static declaration of the console's functional modules and of the modules
each role gets when no explicit setting exists.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from src.domain.entities.enums import AwardType, SystemRole


@dataclass(frozen=True)
class ModuleDefinition:
    """A functional module of the console"""

    key: str
    label: str
    description: str
    group: str
    requires_award: Optional[AwardType] = None


# Navigation order
MODULES: Tuple[ModuleDefinition, ...] = (
    ModuleDefinition("dashboard", "Dashboard", "The main landing page with stats", "Core"),
    ModuleDefinition(
        "private_invitations", "VIP Invitations", "Generate invitation codes", "Core"
    ),
    ModuleDefinition("attendees", "Attendees", "View and manage attendees", "Core"),
    ModuleDefinition(
        "registration", "Registration", "Create and edit attendee registrations", "Core"
    ),
    ModuleDefinition(
        "partnership_management",
        "Partnership Management",
        "Manage partner types and allocations",
        "Management",
    ),
    ModuleDefinition(
        "analytics", "Analytics & Reports", "View system reports and analytics", "Reports"
    ),
    ModuleDefinition(
        "system_users", "System Users", "Manage system users and permissions", "Management"
    ),
    ModuleDefinition(
        "requests", "Requests", "Handle modification and slot requests", "Management"
    ),
    ModuleDefinition(
        "settings", "Settings", "System configuration and templates", "Management"
    ),
    ModuleDefinition(
        "access_levels", "My Access", "Shows users their available slots", "Core"
    ),
    ModuleDefinition(
        "trophy",
        "Sponsor Trophy",
        "Recognition trophy page",
        "Recognition",
        requires_award=AwardType.trophy,
    ),
    ModuleDefinition(
        "certificate",
        "Certificate",
        "Recognition certificate page",
        "Recognition",
        requires_award=AwardType.certificate,
    ),
)

_MODULES_BY_KEY: Dict[str, ModuleDefinition] = {m.key: m for m in MODULES}

DEFAULT_MODULES: Dict[SystemRole, FrozenSet[str]] = {
    SystemRole.admin: frozenset(
        m.key for m in MODULES if m.requires_award is None and m.key != "access_levels"
    ),
    SystemRole.super_user: frozenset(
        {"dashboard", "attendees", "registration", "system_users"}
    ),
    SystemRole.user: frozenset(
        {"dashboard", "attendees", "registration", "access_levels"}
    ),
}


def get_module(key: str) -> Optional[ModuleDefinition]:
    return _MODULES_BY_KEY.get(key)


def default_modules(role: SystemRole) -> FrozenSet[str]:
    return DEFAULT_MODULES.get(role, frozenset())


def setting_key(module_key: str, role: SystemRole) -> str:
    """Settings-store key of the override for (module, role)"""
    return f"module_{module_key}_enabled_for_{role.slug}"
