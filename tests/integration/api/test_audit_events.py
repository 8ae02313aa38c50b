import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_capacity_changes_are_audited(client: AsyncClient, seed_account, test_data):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")
    await client.post(
        "/partnerships", json=test_data.entry("templates", "strategic"), headers=admin
    )
    await client.put(
        f"/accounts/{account_a}/partnership",
        json={"partnership_type": "Strategic"},
        headers=admin,
    )
    await client.put(f"/accounts/{account_a}/quota/VIP", json={"total": 6}, headers=admin)

    response = await client.get(f"/audit/events?account_id={account_a}", headers=admin)

    assert response.status_code == 200
    actions = [e["action"] for e in response.json()["events"]]
    # Newest first
    assert actions == ["quota_overridden", "template_assigned"]
    assert response.json()["events"][0]["actor_email"] == "admin@forum.test"


@pytest.mark.asyncio
async def test_audit_pagination(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")
    for total in (1, 2, 3):
        await client.put(f"/accounts/{account_a}/quota/VIP", json={"total": total}, headers=admin)

    first = await client.get(f"/audit/events?account_id={account_a}&limit=2", headers=admin)
    cursor = first.json()["next_cursor"]
    second = await client.get(
        "/audit/events",
        params={"account_id": account_a, "limit": 2, "cursor": cursor},
        headers=admin,
    )

    assert len(first.json()["events"]) == 2
    assert cursor is not None
    assert len(second.json()["events"]) == 1
    assert second.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_super_user_cannot_read_audit(client: AsyncClient, seed_account):
    _, desk = await seed_account("super_user")

    response = await client.get("/audit/events", headers=desk)

    assert response.status_code == 403
