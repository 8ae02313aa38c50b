from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.slot_request_repository import ISlotRequestRepository
from src.domain.entities import SlotRequest, SlotRequestStatus


class SlotRequestRepository(ISlotRequestRepository):
    """Slot request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[SlotRequest]:
        """Get slot request by ID"""
        stmt = select(SlotRequest).where(SlotRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_requests(
        self,
        status: Optional[SlotRequestStatus] = None,
        account_ids: Optional[List[UUID]] = None,
    ) -> List[SlotRequest]:
        """List slot requests, newest first, optionally filtered"""
        stmt = select(SlotRequest)
        if status is not None:
            stmt = stmt.where(SlotRequest.status == status)
        if account_ids is not None:
            stmt = stmt.where(SlotRequest.account_id.in_(account_ids))
        stmt = stmt.order_by(SlotRequest.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, slot_request: SlotRequest) -> SlotRequest:
        """Create a new slot request"""
        self.session.add(slot_request)
        await self.session.flush()
        await self.session.refresh(slot_request)
        return slot_request

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
        Conditional status write: only a request still pending is updated.

        Returns False when another decision got there first.
        """
        stmt = (
            update(SlotRequest)
            .where(
                SlotRequest.id == request_id,
                SlotRequest.status == SlotRequestStatus.pending,
            )
            .values(
                status=status,
                decided_by=decided_by,
                decided_at=decided_at,
                approved_slots=approved_slots,
                decision_note=decision_note,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False

        # Reload the instance held by the session with the written values
        reload = (
            select(SlotRequest)
            .where(SlotRequest.id == request_id)
            .execution_options(populate_existing=True)
        )
        await self.session.exec(reload)
        return True
