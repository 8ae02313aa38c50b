"""
List Accessible Modules Use Case

Builds the navigation of an account from the module registry.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.module_access import accessible_modules, load_access_context
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SystemRole

from .dtos import AccessibleModulesResponse, ModuleInfo


class ListAccessibleModulesUseCase:
    """Use case for listing the modules an account may use, in navigation order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, role: str) -> Result[AccessibleModulesResponse]:
        try:
            system_role = SystemRole.parse(role)
        except ValueError:
            return Return.err(
                validation_error("INVALID_ROLE", "role", f"Invalid role: {role}")
            )

        async with self.uow:
            snapshot, award_types = await load_access_context(self.uow, account_id)

        modules = accessible_modules(system_role, snapshot, award_types)
        return Return.ok(
            AccessibleModulesResponse(
                role=system_role.slug,
                modules=[
                    ModuleInfo(
                        key=m.key, label=m.label, description=m.description, group=m.group
                    )
                    for m in modules
                ],
            )
        )
