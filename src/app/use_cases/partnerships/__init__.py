"""
Partnership Template Use Cases

Template management and the cascade of template changes to bound accounts.
"""

from .assign_template_use_case import AssignTemplateUseCase
from .create_template_use_case import CreateTemplateUseCase
from .delete_template_use_case import DeleteTemplateUseCase
from .dtos import (
    AssignTemplateCommand,
    AssignTemplateResponse,
    ResyncCommand,
    TemplateCascadeResponse,
    TemplateCommand,
    TemplateResponse,
    TemplateSlotsCommand,
    TemplatesResponse,
)
from .list_templates_use_case import GetTemplateUseCase, ListTemplatesUseCase
from .resync_template_use_case import ResyncTemplateUseCase
from .update_template_use_case import UpdateTemplateUseCase

__all__ = [
    "AssignTemplateUseCase",
    "CreateTemplateUseCase",
    "DeleteTemplateUseCase",
    "GetTemplateUseCase",
    "ListTemplatesUseCase",
    "ResyncTemplateUseCase",
    "UpdateTemplateUseCase",
    "AssignTemplateCommand",
    "AssignTemplateResponse",
    "ResyncCommand",
    "TemplateCascadeResponse",
    "TemplateCommand",
    "TemplateResponse",
    "TemplateSlotsCommand",
    "TemplatesResponse",
]
