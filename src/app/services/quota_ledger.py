"""
Quota Ledger

Per-account, per-category capacity counters. Runs inside the caller's unit of
work; the caller owns the transaction and commits it.
"""

from datetime import datetime
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import Account, QuotaEntry


class QuotaBalance(BaseModel):
    """Ledger figures of one category; available is None when unlimited"""

    category: str
    total: int
    used: int
    available: Optional[int]
    unlimited: bool = False


class QuotaLedger:
    """
    Ledger over the quota_entries table.

    Business Rules:
    - total is never negative; writes below zero are rejected
    - available = total - used, reported raw (a negative value is a signal)
    - Admin and Super User bypass the ledger: always available, no rows written
    - A missing row reads as total = used = 0
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog):
        self.uow = uow
        self.categories = categories

    def resolve_category(self, category: str) -> Result[str]:
        resolved = self.categories.resolve(category)
        if resolved is None:
            return Return.err(
                validation_error(
                    "INVALID_CATEGORY",
                    "category",
                    f"Invalid category: {category}. Must be one of: {', '.join(self.categories)}",
                )
            )
        return Return.ok(resolved)

    async def get_total(self, account: Account, category: str) -> int:
        entry = await self.uow.quotas.get(account.id, category)
        return entry.total if entry else 0

    async def get_used(self, account: Account, category: str) -> int:
        entry = await self.uow.quotas.get(account.id, category)
        return entry.used if entry else 0

    async def get_available(self, account: Account, category: str) -> Optional[int]:
        """total - used, or None for unlimited roles"""
        if account.role.has_unlimited_quota:
            return None
        entry = await self.uow.quotas.get(account.id, category)
        return entry.available if entry else 0

    async def balances(self, account: Account) -> List[QuotaBalance]:
        if account.role.has_unlimited_quota:
            return [
                QuotaBalance(category=c, total=0, used=0, available=None, unlimited=True)
                for c in self.categories
            ]

        entries = {e.category: e for e in await self.uow.quotas.list_by_account(account.id)}
        balances = []
        for category in self.categories:
            entry = entries.get(category)
            total = entry.total if entry else 0
            used = entry.used if entry else 0
            balances.append(
                QuotaBalance(category=category, total=total, used=used, available=total - used)
            )
        return balances

    async def set_total(
        self, account: Account, category: str, new_total: int
    ) -> Result[QuotaEntry]:
        """Overwrite the total of one category (idempotent)"""
        if new_total < 0:
            return Return.err(
                validation_error(
                    "NEGATIVE_TOTAL", "total", f"total for {category} cannot be negative"
                )
            )

        entry_result = await self._locked_entry(account, category)
        if entry_result.is_err():
            return entry_result

        return Return.ok(await self._write_total(entry_result.value, new_total))

    async def increment_total(
        self, account: Account, category: str, delta: int
    ) -> Result[QuotaEntry]:
        """Add ``delta`` (>= 0) to the total of one category"""
        if delta < 0:
            return Return.err(
                validation_error(
                    "NEGATIVE_AMOUNT", "delta", f"delta for {category} cannot be negative"
                )
            )

        entry_result = await self._locked_entry(account, category)
        if entry_result.is_err():
            return entry_result

        entry = entry_result.value
        return Return.ok(await self._write_total(entry, entry.total + delta))

    async def set_used(
        self, account: Account, category: str, used: int
    ) -> Result[QuotaEntry]:
        """Overwrite the consumed count of one category"""
        return await self.set_entry(account, category, used=used)

    async def set_entry(
        self,
        account: Account,
        category: str,
        total: Optional[int] = None,
        used: Optional[int] = None,
    ) -> Result[QuotaEntry]:
        """
        Overwrite total and/or used of one category under a single row lock.

        Values left as None keep their stored figure. Nothing is written
        unless both values pass validation.
        """
        if total is not None and total < 0:
            return Return.err(
                validation_error(
                    "NEGATIVE_TOTAL", "total", f"total for {category} cannot be negative"
                )
            )
        if used is not None and used < 0:
            return Return.err(
                validation_error(
                    "NEGATIVE_AMOUNT", "used", f"used for {category} cannot be negative"
                )
            )

        entry_result = await self._locked_entry(account, category)
        if entry_result.is_err():
            return entry_result

        entry = entry_result.value
        if total is not None:
            entry.total = total
        if used is not None:
            entry.used = used
        entry.updated_at = datetime.utcnow()
        return Return.ok(await self.uow.quotas.save(entry))

    async def overwrite_totals(
        self, account: Account, slots: Mapping[str, int]
    ) -> Result[Dict[str, int]]:
        """
        Overwrite every category's total from ``slots``.

        Categories missing from ``slots`` are set to 0. Used by template
        assignment and cascades, where the template is the source of truth.
        """
        totals: Dict[str, int] = {}
        for category in self.categories:
            new_total = int(slots.get(category, 0))
            result = await self.set_total(account, category, new_total)
            if result.is_err():
                return result
            totals[category] = new_total
        return Return.ok(totals)

    async def clear(self, account: Account) -> int:
        """Drop all ledger rows of an account (role moved to unlimited)"""
        return await self.uow.quotas.delete_by_account(account.id)

    async def _write_total(self, entry: QuotaEntry, new_total: int) -> QuotaEntry:
        entry.total = new_total
        entry.updated_at = datetime.utcnow()
        return await self.uow.quotas.save(entry)

    async def _locked_entry(self, account: Account, category: str) -> Result[QuotaEntry]:
        if account.role.has_unlimited_quota:
            return Return.err(
                validation_error(
                    "UNLIMITED_ROLE",
                    "role",
                    f"{account.role.label} accounts have unlimited capacity and no quota",
                )
            )

        resolved = self.resolve_category(category)
        if resolved.is_err():
            return resolved

        entry = await self.uow.quotas.get_for_update(account.id, resolved.value)
        if entry is None:
            entry = QuotaEntry(account_id=account.id, category=resolved.value, total=0, used=0)
        return Return.ok(entry)
