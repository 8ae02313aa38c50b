"""
Create Template Use Case
"""

import logging
from typing import Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.categories import CategoryCatalog
from src.domain.entities import AuditEvent, PartnershipTemplate

from .dtos import TemplateResponse
from .validation import validate_slots, validate_template_name

logger = logging.getLogger(__name__)


class CreateTemplateUseCase:
    """
    Use case for creating a partnership template.

    Business Rules:
    - name is unique, non-empty and not "N/A"
    - Slots are non-negative integers for known categories
    - Categories left out are stored as 0
    - No account is bound yet, so there is no cascade
    """

    def __init__(self, uow: UnitOfWork, categories: CategoryCatalog = CategoryCatalog()):
        self.uow = uow
        self.categories = categories

    async def execute(
        self, actor_id: Optional[UUID], name: str, slots: Dict[str, int]
    ) -> Result[TemplateResponse]:
        name_result = validate_template_name(name)
        if name_result.is_err():
            return name_result
        slots_result = validate_slots(self.categories, slots)
        if slots_result.is_err():
            return slots_result

        async with self.uow:
            existing = await self.uow.templates.get_by_name(name_result.value)
            if existing is not None:
                return Return.err(
                    Error(
                        "TEMPLATE_ALREADY_EXISTS",
                        f"Partnership template already exists: {name_result.value}",
                    )
                )

            template = await self.uow.templates.create(
                PartnershipTemplate(
                    name=name_result.value, slots_per_category=slots_result.value
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    action="template_created",
                    event_metadata={
                        "template": template.name,
                        "slots_per_category": slots_result.value,
                    },
                )
            )

            await self.uow.commit()

            logger.info("Partnership template %s created", template.name)
            return Return.ok(TemplateResponse.from_template(template, bound_accounts=0))
