"""
Grant Award Use Case

Records a trophy or certificate for an account, unlocking the matching module.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.errors import not_found, validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Award, AuditEvent, AwardType, SystemRole

from .dtos import AwardResponse


def award_response(award: Award) -> AwardResponse:
    return AwardResponse(
        id=str(award.id),
        account_id=str(award.account_id),
        award_type=award.award_type.value,
        title=award.title,
        awarded_at=award.awarded_at.isoformat() + "Z",
    )


class GrantAwardUseCase:
    """
    Use case for granting an award.

    Business Rules:
    - Only Admins grant awards
    - award_type must be trophy or certificate
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: UUID,
        actor_role: SystemRole,
        account_id: UUID,
        award_type: str,
        title: Optional[str] = None,
    ) -> Result[AwardResponse]:
        try:
            parsed_type = AwardType(str(award_type).strip().lower())
        except ValueError:
            return Return.err(
                validation_error(
                    "INVALID_AWARD_TYPE",
                    "award_type",
                    f"Invalid award type: {award_type}. Must be one of: trophy, certificate",
                )
            )

        if actor_role != SystemRole.admin:
            return Return.err(Error("INSUFFICIENT_ROLE", "Only Admins can grant awards"))

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(not_found("ACCOUNT_NOT_FOUND", "Account", account_id))

            award = await self.uow.awards.create(
                Award(
                    account_id=account.id,
                    award_type=parsed_type,
                    title=title,
                    granted_by=actor_id,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    account_id=account.id,
                    action="award_granted",
                    event_metadata={"award_type": parsed_type.value, "title": title},
                )
            )

            await self.uow.commit()

            return Return.ok(award_response(award))
