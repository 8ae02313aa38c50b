from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.slot_requests import (
    ApproveSlotRequestUseCase,
    DeclineSlotRequestUseCase,
)
from src.domain.categories import CategoryCatalog
from src.domain.entities import (
    Account,
    QuotaEntry,
    SlotRequest,
    SlotRequestStatus,
    SystemRole,
)

ADMIN_ID = uuid4()
CATEGORIES = CategoryCatalog(["VIP", "Partner"])


@pytest.fixture
def requester(mock_uow):
    account = Account(id=uuid4(), email="b@forum.test", role=SystemRole.user)
    mock_uow.accounts.get_by_id.return_value = account
    return account


@pytest.fixture
def pending_request(mock_uow, requester):
    slot_request = SlotRequest(
        id=uuid4(),
        account_id=requester.id,
        slot_assignments=[{"category": "VIP"}, {"category": "VIP"}],
        reason="need more VIP",
        status=SlotRequestStatus.pending,
    )
    mock_uow.slot_requests.get_by_id.return_value = slot_request
    return slot_request


@pytest.fixture
def vip_entry(mock_uow, requester):
    entry = QuotaEntry(account_id=requester.id, category="VIP", total=4, used=0)
    mock_uow.quotas.get_for_update.return_value = entry
    return entry


@pytest.mark.asyncio
async def test_partial_approval_increments_only_approved_amount(
    mock_uow, pending_request, vip_entry
):
    """Requested VIP:2, approved VIP:1 -> total grows by exactly 1"""
    # Act
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(
        ADMIN_ID, SystemRole.admin, pending_request.id, {"VIP": 1, "Partner": 0}
    )

    # Assert
    assert result.is_ok()
    assert vip_entry.total == 5
    assert result.value.credited == {"VIP": 1}
    assert result.value.new_totals == {"VIP": 5}
    mock_uow.slot_requests.decide.assert_called_once()
    kwargs = mock_uow.slot_requests.decide.call_args.kwargs
    assert kwargs["approved_slots"] == {"VIP": 1, "Partner": 0}
    assert mock_uow.slot_requests.decide.call_args.args[1] == SlotRequestStatus.approved
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_omitted_amounts_approve_as_requested(mock_uow, pending_request, vip_entry):
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(ADMIN_ID, SystemRole.admin, pending_request.id)

    assert result.is_ok()
    assert vip_entry.total == 6
    assert result.value.credited == {"VIP": 2}


@pytest.mark.asyncio
async def test_approved_exceeding_requested_is_rejected_without_mutation(
    mock_uow, pending_request, vip_entry
):
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(
        ADMIN_ID, SystemRole.admin, pending_request.id, {"VIP": 5}
    )

    assert result.is_err()
    assert result.error.code == "APPROVED_EXCEEDS_REQUESTED"
    assert vip_entry.total == 4
    mock_uow.quotas.save.assert_not_called()
    mock_uow.slot_requests.decide.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_category_not_requested_counts_as_zero(mock_uow, pending_request, vip_entry):
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(
        ADMIN_ID, SystemRole.admin, pending_request.id, {"VIP": 1, "Partner": 1}
    )

    assert result.is_err()
    assert result.error.code == "APPROVED_EXCEEDS_REQUESTED"


@pytest.mark.asyncio
async def test_nothing_approved_is_rejected(mock_uow, pending_request):
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(
        ADMIN_ID, SystemRole.admin, pending_request.id, {"VIP": 0}
    )

    assert result.is_err()
    assert result.error.code == "NOTHING_APPROVED"


@pytest.mark.asyncio
async def test_decided_request_is_a_conflict(mock_uow, pending_request):
    pending_request.status = SlotRequestStatus.approved

    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(ADMIN_ID, SystemRole.admin, pending_request.id)

    assert result.is_err()
    assert result.error.code == "REQUEST_ALREADY_DECIDED"
    mock_uow.quotas.save.assert_not_called()


@pytest.mark.asyncio
async def test_losing_a_concurrent_decision_does_not_commit(
    mock_uow, pending_request, vip_entry
):
    """The conditional status write fails, so the credits are never committed"""
    mock_uow.slot_requests.decide.return_value = False

    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(ADMIN_ID, SystemRole.admin, pending_request.id)

    assert result.is_err()
    assert result.error.code == "REQUEST_ALREADY_DECIDED"
    mock_uow.commit.assert_not_called()
    mock_uow.__aexit__.assert_called_once()


@pytest.mark.asyncio
async def test_users_cannot_approve(mock_uow, pending_request):
    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(uuid4(), SystemRole.user, pending_request.id)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_unknown_request(mock_uow):
    mock_uow.slot_requests.get_by_id.return_value = None

    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES)
    result = await use_case.execute(ADMIN_ID, SystemRole.admin, uuid4())

    assert result.is_err()
    assert result.error.code == "SLOT_REQUEST_NOT_FOUND"


@pytest.mark.asyncio
async def test_approval_publishes_event_and_survives_sink_failure(
    mock_uow, pending_request, vip_entry
):
    sink = MagicMock()
    sink.publish = AsyncMock(side_effect=RuntimeError("smtp down"))

    use_case = ApproveSlotRequestUseCase(mock_uow, CATEGORIES, notifications=sink)
    result = await use_case.execute(ADMIN_ID, SystemRole.admin, pending_request.id)

    assert result.is_ok()
    event = sink.publish.call_args.args[0]
    assert event.name == "slot_request.approved"
    assert event.payload["approved_slots"] == {"VIP": 2, "Partner": 0}


@pytest.mark.asyncio
async def test_decline_has_no_ledger_effect(mock_uow, pending_request):
    sink = MagicMock()
    sink.publish = AsyncMock()

    use_case = DeclineSlotRequestUseCase(mock_uow, notifications=sink)
    result = await use_case.execute(
        ADMIN_ID, SystemRole.admin, pending_request.id, note="no seats left this year"
    )

    assert result.is_ok()
    mock_uow.quotas.save.assert_not_called()
    assert mock_uow.slot_requests.decide.call_args.args[1] == SlotRequestStatus.declined
    assert sink.publish.call_args.args[0].name == "slot_request.declined"


@pytest.mark.asyncio
async def test_decline_twice_is_a_conflict(mock_uow, pending_request):
    pending_request.status = SlotRequestStatus.declined

    result = await DeclineSlotRequestUseCase(mock_uow).execute(
        ADMIN_ID, SystemRole.admin, pending_request.id
    )

    assert result.is_err()
    assert result.error.code == "REQUEST_ALREADY_DECIDED"
