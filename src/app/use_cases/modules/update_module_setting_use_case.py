"""
Update Module Setting Use Case

Administrative enable/disable of a module for a role.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, ModuleSetting, SystemRole
from src.domain.modules import get_module, setting_key

from .dtos import ModuleSettingResponse

logger = logging.getLogger(__name__)


class UpdateModuleSettingUseCase:
    """
    Use case for writing a module setting.

    Business Rules:
    - Admin only
    - Creates the key on first edit, updates it afterwards, never deletes it
    - expected_version, when given, must match the stored version
    - Award-gated modules cannot be configured
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        module: str,
        role: str,
        enabled: bool,
        expected_version: Optional[int] = None,
    ) -> Result[ModuleSettingResponse]:
        if actor_role != SystemRole.admin:
            return Return.err(
                Error("INSUFFICIENT_ROLE", "Only admins can change module settings")
            )

        definition = get_module(module)
        if definition is None:
            return Return.err(
                validation_error("INVALID_MODULE", "module", f"Unknown module: {module}")
            )
        if definition.requires_award is not None:
            return Return.err(
                validation_error(
                    "INVALID_MODULE",
                    "module",
                    f"Module {module} is unlocked by awards and has no settings",
                )
            )

        try:
            target_role = SystemRole.parse(role)
        except ValueError:
            return Return.err(
                validation_error("INVALID_ROLE", "role", f"Invalid role: {role}")
            )

        key = setting_key(module, target_role)

        async with self.uow:
            setting = await self.uow.module_settings.get_by_key(key)
            current_version = setting.version if setting else 0

            if expected_version is not None and expected_version != current_version:
                return Return.err(
                    Error(
                        "SETTING_VERSION_CONFLICT",
                        f"Setting {key} changed since it was read: expected version "
                        f"{expected_version} but found {current_version}",
                        reason="expected_version",
                    )
                )

            old_value = setting.enabled if setting else None
            if setting is None:
                setting = ModuleSetting(key=key, enabled=enabled, version=1)
            else:
                setting.enabled = enabled
                setting.version = current_version + 1
            setting.updated_by = actor_id
            setting.updated_at = datetime.utcnow()
            setting = await self.uow.module_settings.save(setting)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    action="module_setting_changed",
                    event_metadata={"key": key, "old_value": old_value, "new_value": enabled},
                )
            )

            await self.uow.commit()

            logger.info("Module setting %s set to %s by %s", key, enabled, actor_id)

            return Return.ok(
                ModuleSettingResponse(
                    key=key,
                    module=module,
                    role=target_role.slug,
                    enabled=setting.enabled,
                    version=setting.version,
                )
            )
