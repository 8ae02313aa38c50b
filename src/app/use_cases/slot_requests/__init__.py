"""
Slot Request Use Cases

The pending -> approved | declined workflow for extra registration slots.
"""

from .approve_slot_request_use_case import ApproveSlotRequestUseCase
from .decline_slot_request_use_case import DeclineSlotRequestUseCase
from .dtos import (
    ApprovalResponse,
    ApproveSlotRequestCommand,
    DeclineSlotRequestCommand,
    SlotAssignment,
    SlotRequestResponse,
    SlotRequestsResponse,
    SubmitSlotRequestCommand,
)
from .list_slot_requests_use_case import GetSlotRequestUseCase, ListSlotRequestsUseCase
from .submit_slot_request_use_case import SubmitSlotRequestUseCase

__all__ = [
    "ApproveSlotRequestUseCase",
    "DeclineSlotRequestUseCase",
    "GetSlotRequestUseCase",
    "ListSlotRequestsUseCase",
    "SubmitSlotRequestUseCase",
    "ApprovalResponse",
    "ApproveSlotRequestCommand",
    "DeclineSlotRequestCommand",
    "SlotAssignment",
    "SlotRequestResponse",
    "SlotRequestsResponse",
    "SubmitSlotRequestCommand",
]
