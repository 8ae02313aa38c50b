"""
Resync Template Use Case

Re-applies a template to its bound accounts so failed cascade entries can be
retried. For a deleted template it finishes the revocation instead.
"""

from typing import List, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import not_found
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.template_synchronizer import TemplateSynchronizer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog

from .dtos import TemplateCascadeResponse


class ResyncTemplateUseCase:
    """
    Use case for retrying a cascade.

    Business Rules:
    - Without account_ids every currently bound account is synced
    - Given account_ids no longer bound to the template are skipped
    - Template deleted but accounts still bound to its name (failed revoke
      cascade): those accounts are zeroed and unbound, as the delete would have
    - Template deleted and nothing bound to it -> TEMPLATE_NOT_FOUND
    - Same per-account transactions as the update cascade
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog = CategoryCatalog()):
        self.uow = uow
        self.synchronizer = TemplateSynchronizer(uow, QuotaLedger(uow, categories))

    async def execute(
        self, name: str, account_ids: Optional[List[UUID]] = None
    ) -> Result[TemplateCascadeResponse]:
        async with self.uow:
            template = await self.uow.templates.get_by_name(name)
            template_name = template.name if template else name.strip()
            bound_ids = await self.uow.accounts.list_ids_by_partnership_type(template_name)

            if template is None and not bound_ids:
                return Return.err(not_found("TEMPLATE_NOT_FOUND", "Partnership template", name))

            slots = dict(template.slots_per_category) if template else {}
            if account_ids is None:
                account_ids = bound_ids

        if template is None:
            results = await self.synchronizer.cascade(
                template_name, list(account_ids), slots, unbind=True, action="template_revoked"
            )
        else:
            results = await self.synchronizer.cascade(
                template_name, list(account_ids), slots, action="template_resynced"
            )
        return Return.ok(TemplateCascadeResponse.build(template_name, results))
