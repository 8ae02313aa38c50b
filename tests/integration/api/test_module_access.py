import pytest
from httpx import AsyncClient


def _keys(response) -> list:
    return [m["key"] for m in response.json()["modules"]]


@pytest.mark.asyncio
async def test_default_modules_per_role(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    _, user = await seed_account("user_a")

    admin_modules = await client.get("/modules", headers=admin)
    user_modules = await client.get("/modules", headers=user)

    assert admin_modules.status_code == 200
    assert "partnership_management" in _keys(admin_modules)
    assert "access_levels" not in _keys(admin_modules)
    assert _keys(user_modules) == ["dashboard", "attendees", "registration", "access_levels"]
    assert user_modules.json()["role"] == "user"


@pytest.mark.asyncio
async def test_requires_authentication(client: AsyncClient):
    response = await client.get("/modules")

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_setting_disables_module_for_role(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    _, user = await seed_account("user_a")

    response = await client.put(
        "/modules/settings",
        json={"module": "dashboard", "role": "User", "enabled": False},
        headers=admin,
    )

    assert response.status_code == 200
    assert response.json()["key"] == "module_dashboard_enabled_for_user"
    assert response.json()["version"] == 1

    access = await client.get("/modules/dashboard/access", headers=user)
    assert access.json()["allowed"] is False
    assert "dashboard" not in _keys(await client.get("/modules", headers=user))


@pytest.mark.asyncio
async def test_stale_setting_version_is_a_conflict(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    payload = {"module": "analytics", "role": "super_user", "enabled": True}

    first = await client.put("/modules/settings", json=payload, headers=admin)
    stale = await client.put(
        "/modules/settings", json={**payload, "expected_version": 0}, headers=admin
    )

    assert first.status_code == 200
    assert stale.status_code == 409
    assert stale.json()["error"]["code"] == "SETTING_VERSION_CONFLICT"


@pytest.mark.asyncio
async def test_trophy_visible_after_award(client: AsyncClient, seed_account):
    _, admin = await seed_account("admin")
    account_a, user = await seed_account("user_a")

    before = await client.get("/modules/trophy/access", headers=user)
    granted = await client.post(
        f"/accounts/{account_a}/awards",
        json={"award_type": "trophy", "title": "Platinum sponsor"},
        headers=admin,
    )
    after = await client.get("/modules/trophy/access", headers=user)

    assert before.json()["allowed"] is False
    assert granted.status_code == 201
    assert after.json()["allowed"] is True
    assert "certificate" not in _keys(await client.get("/modules", headers=user))


@pytest.mark.asyncio
async def test_unknown_module(client: AsyncClient, seed_account):
    _, user = await seed_account("user_a")

    response = await client.get("/modules/payroll/access", headers=user)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_MODULE"


@pytest.mark.asyncio
async def test_users_cannot_edit_settings(client: AsyncClient, seed_account):
    _, user = await seed_account("user_a")

    response = await client.put(
        "/modules/settings",
        json={"module": "dashboard", "role": "user", "enabled": False},
        headers=user,
    )

    assert response.status_code == 403
