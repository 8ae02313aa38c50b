"""
Check Module Access Use Case

Answers "can this role use this module?" for the identity making the call.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.module_access import can_access, load_access_context
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SystemRole
from src.domain.modules import get_module

from .dtos import ModuleAccessResponse


class CheckModuleAccessUseCase:
    """
    Use case for checking module access.

    Business Rules:
    - Explicit module setting for (module, role) wins
    - Otherwise the role's default module list applies
    - Award-gated modules need an award of the matching type
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, role: str, module: str
    ) -> Result[ModuleAccessResponse]:
        try:
            system_role = SystemRole.parse(role)
        except ValueError:
            return Return.err(
                validation_error("INVALID_ROLE", "role", f"Invalid role: {role}")
            )

        if get_module(module) is None:
            return Return.err(
                validation_error("INVALID_MODULE", "module", f"Unknown module: {module}")
            )

        async with self.uow:
            snapshot, award_types = await load_access_context(self.uow, account_id)

        return Return.ok(
            ModuleAccessResponse(
                module=module,
                role=system_role.slug,
                allowed=can_access(system_role, module, snapshot, award_types),
            )
        )
