"""
List / Get Template Use Cases
"""

from libs.result import Result, Return
from src.app.errors import not_found
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TemplateResponse, TemplatesResponse


class ListTemplatesUseCase:
    """All templates, ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[TemplatesResponse]:
        async with self.uow:
            templates = await self.uow.templates.list_all()
            return Return.ok(
                TemplatesResponse(
                    templates=[TemplateResponse.from_template(t) for t in templates]
                )
            )


class GetTemplateUseCase:
    """One template with the number of accounts bound to it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str) -> Result[TemplateResponse]:
        async with self.uow:
            template = await self.uow.templates.get_by_name(name)
            if template is None:
                return Return.err(not_found("TEMPLATE_NOT_FOUND", "Partnership template", name))

            bound = await self.uow.accounts.list_ids_by_partnership_type(template.name)
            return Return.ok(TemplateResponse.from_template(template, bound_accounts=len(bound)))
