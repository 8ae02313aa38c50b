import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.app.errors import StorageError
from src.depends import get_unit_of_work


class FailingCommitUnitOfWork(SqlAlchemyUnitOfWork):
    """Reads work, every commit fails like an unavailable database"""

    async def commit(self):
        raise StorageError("database is locked")


@pytest_asyncio.fixture
async def failing_client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield FailingCommitUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_storage_failure_is_a_retryable_503(failing_client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")

    response = await failing_client.put(
        f"/accounts/{account_a}/quota/VIP", json={"total": 4}, headers=admin
    )

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORAGE_ERROR"
    # Internal details stay in the log
    assert "database is locked" not in response.text


@pytest.mark.asyncio
async def test_validation_and_conflict_stay_client_errors(
    failing_client: AsyncClient, seed_account
):
    admin_id, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")

    invalid = await failing_client.put(
        f"/accounts/{account_a}/quota/VIP", json={"total": -1}, headers=admin
    )
    conflict = await failing_client.put(
        f"/accounts/{admin_id}/role", json={"role": "User"}, headers=admin
    )

    assert invalid.status_code == 400
    assert invalid.json()["error"] == {
        "code": "NEGATIVE_TOTAL",
        "message": "total for VIP cannot be negative",
        "field": "total",
    }
    assert conflict.status_code == 409
    assert conflict.json()["error"]["code"] == "CANNOT_DEMOTE_SELF"
