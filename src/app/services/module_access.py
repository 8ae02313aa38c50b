"""
Module Access Resolver

Decides whether a role may use a functional module. This is the only place
module visibility is computed; callers never re-implement role checks.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from src.domain.entities import AwardType, ModuleSetting, SystemRole
from src.domain.modules import MODULES, ModuleDefinition, default_modules, get_module, setting_key

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class ModuleSettingsSnapshot:
    """
    Point-in-time copy of the sparse module-setting table.

    ``values`` maps setting keys to the stored value, ``versions`` maps the
    same keys to their edit counter. A missing key means "use the defaults".
    """

    values: Mapping[str, object] = field(default_factory=dict)
    versions: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Iterable[ModuleSetting]) -> "ModuleSettingsSnapshot":
        values: Dict[str, object] = {}
        versions: Dict[str, int] = {}
        for setting in settings:
            values[setting.key] = setting.enabled
            versions[setting.key] = setting.version
        return cls(values=values, versions=versions)

    def lookup(self, key: str) -> Optional[bool]:
        """Explicit value for a key, or None when absent or unreadable"""
        try:
            raw = self.values.get(key)
        except Exception:
            logger.warning("Module settings lookup failed for %s, using defaults", key)
            return None
        return _coerce_bool(key, raw)


EMPTY_SNAPSHOT = ModuleSettingsSnapshot()


def _coerce_bool(key: str, raw) -> Optional[bool]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        folded = raw.strip().lower()
        if folded in _TRUE_VALUES:
            return True
        if folded in _FALSE_VALUES:
            return False
    logger.warning("Ignoring unreadable module setting %s=%r", key, raw)
    return None


def _parse_role(role) -> Optional[SystemRole]:
    try:
        return SystemRole.parse(role)
    except ValueError:
        logger.warning("Unknown role %r in module access check", role)
        return None


def can_access(
    role,
    module_name: str,
    overrides: Optional[ModuleSettingsSnapshot] = None,
    award_types: Iterable[AwardType] = (),
) -> bool:
    """
    Whether ``role`` may see and use ``module_name``.

    1. An explicit setting for ``module_{module}_enabled_for_{role}`` wins.
    2. Otherwise the module must be in the role's default list.

    Award-gated modules (trophy, certificate) ignore settings and are visible
    only when the account holds an award of the matching type.

    Never raises: unknown roles get nothing, unreadable overrides fall back
    to the defaults.
    """
    parsed_role = _parse_role(role)
    if parsed_role is None:
        return False

    module = get_module(module_name)
    if module is not None and module.requires_award is not None:
        return module.requires_award in set(award_types)

    snapshot = overrides if overrides is not None else EMPTY_SNAPSHOT
    explicit = snapshot.lookup(setting_key(module_name, parsed_role))
    if explicit is not None:
        return explicit

    return module_name in default_modules(parsed_role)


def accessible_modules(
    role,
    overrides: Optional[ModuleSettingsSnapshot] = None,
    award_types: Iterable[AwardType] = (),
) -> List[ModuleDefinition]:
    """Modules visible to ``role``, in navigation order"""
    awards = set(award_types)
    return [m for m in MODULES if can_access(role, m.key, overrides, awards)]


async def load_access_context(uow, account_id) -> Tuple[ModuleSettingsSnapshot, Set[AwardType]]:
    """Settings snapshot and the account's award types, read in the open unit of work"""
    settings = await uow.module_settings.list_all()
    award_types = await uow.awards.get_types_by_account(account_id)
    return ModuleSettingsSnapshot.from_settings(settings), set(award_types)
