from uuid import uuid4

import pytest

from src.app.errors import StorageError
from src.app.services.quota_ledger import QuotaLedger
from src.app.services.template_synchronizer import TemplateSynchronizer
from src.domain.categories import CategoryCatalog
from src.domain.entities import Account, SystemRole


def _account(template="Strategic", role=SystemRole.user):
    return Account(
        id=uuid4(), email=f"{uuid4().hex}@forum.test", role=role, partnership_type_name=template
    )


@pytest.fixture
def synchronizer(mock_uow):
    ledger = QuotaLedger(mock_uow, CategoryCatalog(["VIP", "Partner"]))
    return TemplateSynchronizer(mock_uow, ledger)


@pytest.mark.asyncio
async def test_cascade_overwrites_each_account_in_its_own_transaction(synchronizer, mock_uow):
    first, second = _account(), _account()
    accounts = {first.id: first, second.id: second}
    mock_uow.accounts.get_by_id.side_effect = lambda account_id: accounts[account_id]

    results = await synchronizer.cascade("Strategic", [first.id, second.id], {"VIP": 8})

    assert [r.status for r in results] == ["synced", "synced"]
    assert results[0].totals == {"VIP": 8, "Partner": 0}
    assert mock_uow.commit.await_count == 2
    assert mock_uow.__aenter__.await_count == 2


@pytest.mark.asyncio
async def test_one_failing_account_does_not_stop_the_cascade(synchronizer, mock_uow):
    """Earlier and later accounts stay committed when one account fails"""
    ok_before, broken, ok_after = _account(), _account(), _account()
    accounts = {a.id: a for a in (ok_before, broken, ok_after)}
    mock_uow.accounts.get_by_id.side_effect = lambda account_id: accounts[account_id]

    async def commit():
        if mock_uow.commit.await_count == 2:
            raise StorageError("disk full")

    mock_uow.commit.side_effect = commit

    results = await synchronizer.cascade(
        "Strategic", [ok_before.id, broken.id, ok_after.id], {"VIP": 1}
    )

    assert [r.status for r in results] == ["synced", "failed", "synced"]
    assert results[1].account_id == str(broken.id)
    assert results[1].error_code == "STORAGE_ERROR"
    assert mock_uow.commit.await_count == 3


@pytest.mark.asyncio
async def test_rebound_account_is_skipped(synchronizer, mock_uow):
    moved = _account(template="Gold")
    mock_uow.accounts.get_by_id.return_value = moved

    results = await synchronizer.cascade("Strategic", [moved.id], {"VIP": 1})

    assert results[0].status == "skipped"
    mock_uow.quotas.save.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_missing_account_is_reported(synchronizer, mock_uow):
    account_id = uuid4()

    results = await synchronizer.cascade("Strategic", [account_id], {"VIP": 1})

    assert results[0].status == "failed"
    assert results[0].error_code == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_unbind_clears_binding_and_zeroes_totals(synchronizer, mock_uow):
    account = _account()
    mock_uow.accounts.get_by_id.return_value = account

    results = await synchronizer.cascade("Strategic", [account.id], {}, unbind=True)

    assert results[0].status == "synced"
    assert results[0].totals == {"VIP": 0, "Partner": 0}
    assert account.partnership_type_name is None
    mock_uow.accounts.update.assert_called_once_with(account)
