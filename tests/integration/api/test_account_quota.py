import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_unbound_user_has_zero_quota(client: AsyncClient, seed_account):
    account_a, user = await seed_account("user_a")

    response = await client.get(f"/accounts/{account_a}/quota", headers=user)

    assert response.status_code == 200
    data = response.json()
    assert data["partnership_type"] == "N/A"
    assert data["unlimited"] is False
    assert all(b["total"] == 0 and b["available"] == 0 for b in data["balances"])


@pytest.mark.asyncio
async def test_admin_quota_is_unlimited(client: AsyncClient, seed_account):
    account_id, admin = await seed_account("admin")

    response = await client.get(f"/accounts/{account_id}/quota", headers=admin)

    assert response.json()["unlimited"] is True
    assert all(b["available"] is None for b in response.json()["balances"])


@pytest.mark.asyncio
async def test_user_cannot_read_other_accounts(client: AsyncClient, seed_account):
    account_a, _ = await seed_account("user_a")
    _, user_b = await seed_account("user_b")

    response = await client.get(f"/accounts/{account_a}/quota", headers=user_b)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_override_and_capacity_check(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, user = await seed_account("user_a")

    override = await client.put(
        f"/accounts/{account_a}/quota/VIP", json={"total": 3, "used": 2}, headers=admin
    )
    within = await client.get(f"/accounts/{account_a}/capacity/VIP", headers=user)
    beyond = await client.get(f"/accounts/{account_a}/capacity/VIP?requested=4", headers=user)

    assert override.status_code == 200
    assert override.json()["available"] == 1
    assert within.json()["allowed"] is True
    assert within.json()["warning"] is None
    # The default policy is advisory
    assert beyond.json()["allowed"] is True
    assert beyond.json()["warning"]


@pytest.mark.asyncio
async def test_override_rejects_negative_total(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")

    response = await client.put(
        f"/accounts/{account_a}/quota/VIP", json={"total": -1}, headers=admin
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NEGATIVE_TOTAL"


@pytest.mark.asyncio
async def test_promotion_clears_quota(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")
    await client.put(f"/accounts/{account_a}/quota/VIP", json={"total": 3}, headers=admin)

    response = await client.put(
        f"/accounts/{account_a}/role", json={"role": "Super User"}, headers=admin
    )

    assert response.status_code == 200
    assert response.json()["new_role"] == "super_user"
    assert response.json()["quota_cleared"] is True

    quota = await client.get(f"/accounts/{account_a}/quota", headers=admin)
    assert quota.json()["unlimited"] is True


@pytest.mark.asyncio
async def test_admin_cannot_demote_self(client: AsyncClient, seed_account):
    admin_id, admin = await seed_account("admin")

    response = await client.put(f"/accounts/{admin_id}/role", json={"role": "User"}, headers=admin)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_DEMOTE_SELF"


@pytest.mark.asyncio
async def test_super_user_cannot_change_roles(client: AsyncClient, seed_account):
    _, desk = await seed_account("super_user")
    account_a, _ = await seed_account("user_a")

    response = await client.put(f"/accounts/{account_a}/role", json={"role": "Admin"}, headers=desk)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_awards_are_listed_for_the_holder(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, user = await seed_account("user_a")
    await client.post(
        f"/accounts/{account_a}/awards",
        json={"award_type": "certificate", "title": "Ten years of partnership"},
        headers=admin,
    )

    response = await client.get(f"/accounts/{account_a}/awards", headers=user)

    assert response.status_code == 200
    awards = response.json()["awards"]
    assert [a["award_type"] for a in awards] == ["certificate"]
    assert awards[0]["title"] == "Ten years of partnership"


@pytest.mark.asyncio
async def test_unknown_award_type(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, _ = await seed_account("user_a")

    response = await client.post(
        f"/accounts/{account_a}/awards", json={"award_type": "medal"}, headers=admin
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_AWARD_TYPE"
