"""
Change Role Use Case

Handles the Admin edit of an account's system role.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent, SystemRole

from .dtos import ChangeRoleResponse


class ChangeRoleUseCase:
    """
    Use case for changing an account's system role.

    Business Rules:
    - Only Admins can change roles
    - Admins cannot demote themselves
    - Validate role is one of Admin, Super User, User
    - Moving to an unlimited role drops the account's quota rows and
      partnership binding; unlimited accounts carry neither
    - Moving down to User starts from an empty (all-zero) ledger
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog = CategoryCatalog()):
        self.uow = uow
        self.ledger = QuotaLedger(uow, categories)

    async def execute(
        self, actor_id: UUID, actor_role: SystemRole, account_id: UUID, new_role: str
    ) -> Result[ChangeRoleResponse]:
        """
        Execute change role use case.

        Args:
            actor_id: Account ID of the Admin making the change
            actor_role: Role of the caller
            account_id: Account whose role is being changed
            new_role: New role, slug or display label ("Super User")

        Returns:
            Result with old and new role, or Error
        """
        try:
            role = SystemRole.parse(new_role)
        except ValueError:
            return Return.err(
                validation_error(
                    "INVALID_ROLE",
                    "role",
                    f"Invalid role: {new_role}. Must be one of: Admin, Super User, User",
                )
            )

        if actor_role != SystemRole.admin:
            return Return.err(Error("INSUFFICIENT_ROLE", "Only Admins can change roles"))

        if actor_id == account_id and role != SystemRole.admin:
            return Return.err(Error("CANNOT_DEMOTE_SELF", "Admin cannot demote themselves"))

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            old_role = account.role
            quota_cleared = False
            old_binding = account.partnership_type_name

            if role.has_unlimited_quota and not old_role.has_unlimited_quota:
                cleared_rows = await self.ledger.clear(account)
                quota_cleared = True
                account.partnership_type_name = None
            else:
                cleared_rows = 0

            account.role = role
            account.updated_at = datetime.utcnow()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=account.id,
                    action="role_changed",
                    event_metadata={
                        "old_role": old_role.slug,
                        "new_role": role.slug,
                        "quota_rows_cleared": cleared_rows,
                        "old_partnership_type": old_binding,
                    },
                )
            )

            await self.uow.commit()

            return Return.ok(
                ChangeRoleResponse(
                    account_id=str(account_id),
                    old_role=old_role.slug,
                    new_role=role.slug,
                    quota_cleared=quota_cleared,
                )
            )
