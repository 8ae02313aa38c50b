"""
List Module Settings Use Case

Module x role matrix for the settings screen.
"""

from libs.result import Error, Result, Return
from src.app.services.module_access import ModuleSettingsSnapshot, can_access
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SystemRole
from src.domain.modules import MODULES, setting_key

from .dtos import ModuleSettingEntry, ModuleSettingsResponse


class ListModuleSettingsUseCase:
    """
    Use case for listing module settings.

    Business Rules:
    - Admin only
    - Award-gated modules are not configurable and are left out
    - ``explicit`` is the stored override, ``effective`` what the resolver answers
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_role: SystemRole) -> Result[ModuleSettingsResponse]:
        if actor_role != SystemRole.admin:
            return Return.err(
                Error("INSUFFICIENT_ROLE", "Only admins can view module settings")
            )

        async with self.uow:
            snapshot = ModuleSettingsSnapshot.from_settings(
                await self.uow.module_settings.list_all()
            )

        entries = []
        for module in MODULES:
            if module.requires_award is not None:
                continue
            for role in SystemRole:
                key = setting_key(module.key, role)
                entries.append(
                    ModuleSettingEntry(
                        module=module.key,
                        role=role.slug,
                        key=key,
                        explicit=snapshot.lookup(key),
                        effective=can_access(role, module.key, snapshot),
                        version=snapshot.versions.get(key),
                    )
                )

        return Return.ok(ModuleSettingsResponse(settings=entries))
