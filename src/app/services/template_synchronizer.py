"""
Partnership-Template Synchronizer

Propagates a template's slot allocation to every account bound to it.
"""

import logging
from typing import Dict, List, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.errors import StorageError
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


class AccountSyncResult(BaseModel):
    """Outcome of the cascade for one account"""

    account_id: str
    status: str  # synced | skipped | failed
    totals: Optional[Dict[str, int]] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class TemplateSynchronizer:
    """
    Cascade of a template change to its bound accounts.

    Business Rules:
    - Totals are overwritten, never added to: the template is the source of
      truth for bound accounts
    - Each account is updated in its own transaction; a failing account is
      reported and the cascade moves on, earlier accounts stay committed
    - Accounts whose binding changed since the cascade started are skipped
    - Unlimited-role accounts get no ledger writes
    """

    def __init__(self, uow: UnitOfWork, ledger: QuotaLedger):
        self.uow = uow
        self.ledger = ledger

    async def cascade(
        self,
        template_name: str,
        account_ids: List[UUID],
        slots: Mapping[str, int],
        unbind: bool = False,
        action: str = "template_synced",
    ) -> List[AccountSyncResult]:
        """
        Apply ``slots`` to each account in ``account_ids``.

        Args:
            template_name: Template the accounts are expected to be bound to
            account_ids: Accounts to update, one transaction each
            slots: New totals per category (missing categories become 0)
            unbind: Clear the accounts' partnership binding as well
            action: Audit action recorded per account
        """
        results: List[AccountSyncResult] = []
        for account_id in account_ids:
            try:
                results.append(
                    await self._sync_account(template_name, account_id, slots, unbind, action)
                )
            except StorageError as exc:
                logger.warning(
                    "Template %s cascade failed for account %s: %s",
                    template_name,
                    account_id,
                    exc.message,
                )
                results.append(
                    AccountSyncResult(
                        account_id=str(account_id),
                        status="failed",
                        error_code=exc.code,
                        error_message=exc.message,
                    )
                )

        failed = sum(1 for r in results if r.status == "failed")
        logger.info(
            "Template %s cascade finished: %d account(s), %d failed",
            template_name,
            len(results),
            failed,
        )
        return results

    async def _sync_account(
        self,
        template_name: str,
        account_id: UUID,
        slots: Mapping[str, int],
        unbind: bool,
        action: str,
    ) -> AccountSyncResult:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return AccountSyncResult(
                    account_id=str(account_id),
                    status="failed",
                    error_code="ACCOUNT_NOT_FOUND",
                    error_message=f"Account not found: {account_id}",
                )

            if account.partnership_type_name != template_name:
                return AccountSyncResult(account_id=str(account_id), status="skipped")

            totals: Optional[Dict[str, int]] = None
            if not account.role.has_unlimited_quota:
                result = await self.ledger.overwrite_totals(account, slots)
                if result.is_err():
                    return AccountSyncResult(
                        account_id=str(account_id),
                        status="failed",
                        error_code=result.error.code,
                        error_message=result.error.message,
                    )
                totals = result.value

            if unbind:
                account.partnership_type_name = None
                await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=None,
                    account_id=account_id,
                    action=action,
                    event_metadata={
                        "template": template_name,
                        "totals": totals,
                        "unbound": unbind,
                    },
                )
            )

            await self.uow.commit()

            return AccountSyncResult(
                account_id=str(account_id),
                status="synced" if totals is not None or unbind else "skipped",
                totals=totals,
            )
