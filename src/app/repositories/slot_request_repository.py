from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from src.domain.entities import SlotRequest, SlotRequestStatus


class ISlotRequestRepository(ABC):
    """Slot request repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[SlotRequest]:
        """Get slot request by ID"""
        pass

    @abstractmethod
    async def list_requests(
        self,
        status: Optional[SlotRequestStatus] = None,
        account_ids: Optional[List[UUID]] = None,
    ) -> List[SlotRequest]:
        """List slot requests, newest first, optionally filtered"""
        pass

    @abstractmethod
    async def create(self, slot_request: SlotRequest) -> SlotRequest:
        """Create a new slot request"""
        pass

    @abstractmethod
    async def decide(
        self,
        request_id: UUID,
        status: SlotRequestStatus,
        decided_by: Optional[UUID],
        decided_at: datetime,
        approved_slots: Optional[Dict[str, int]] = None,
        decision_note: Optional[str] = None,
    ) -> bool:
        """
        Move a pending request to a terminal status.

        Returns False when the request is no longer pending, so a concurrent
        decision cannot be applied twice.
        """
        pass
