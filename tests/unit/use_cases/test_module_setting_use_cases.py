from uuid import uuid4

import pytest

from src.app.use_cases.modules import (
    CheckModuleAccessUseCase,
    ListAccessibleModulesUseCase,
    ListModuleSettingsUseCase,
    UpdateModuleSettingUseCase,
)
from src.domain.entities import AwardType, ModuleSetting, SystemRole


@pytest.mark.asyncio
async def test_check_access_uses_stored_settings(mock_uow):
    mock_uow.module_settings.list_all.return_value = [
        ModuleSetting(key="module_dashboard_enabled_for_user", enabled=False)
    ]

    result = await CheckModuleAccessUseCase(mock_uow).execute(uuid4(), "User", "dashboard")

    assert result.is_ok()
    assert result.value.allowed is False


@pytest.mark.asyncio
async def test_check_access_rejects_unknown_module(mock_uow):
    result = await CheckModuleAccessUseCase(mock_uow).execute(uuid4(), "User", "billing")

    assert result.is_err()
    assert result.error.code == "INVALID_MODULE"


@pytest.mark.asyncio
async def test_trophy_listed_after_award(mock_uow):
    mock_uow.awards.get_types_by_account.return_value = {AwardType.trophy}

    result = await ListAccessibleModulesUseCase(mock_uow).execute(uuid4(), SystemRole.user)

    assert result.is_ok()
    assert "trophy" in [m.key for m in result.value.modules]


@pytest.mark.asyncio
async def test_settings_matrix_is_admin_only(mock_uow):
    result = await ListModuleSettingsUseCase(mock_uow).execute(SystemRole.super_user)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_first_update_creates_version_one(mock_uow):
    result = await UpdateModuleSettingUseCase(mock_uow).execute(
        uuid4(), SystemRole.admin, "analytics", "Super User", True
    )

    assert result.is_ok()
    assert result.value.key == "module_analytics_enabled_for_super_user"
    assert result.value.version == 1
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_stale_version_is_a_conflict(mock_uow):
    mock_uow.module_settings.get_by_key.return_value = ModuleSetting(
        key="module_analytics_enabled_for_user", enabled=True, version=4
    )

    result = await UpdateModuleSettingUseCase(mock_uow).execute(
        uuid4(), SystemRole.admin, "analytics", "user", False, expected_version=3
    )

    assert result.is_err()
    assert result.error.code == "SETTING_VERSION_CONFLICT"
    mock_uow.module_settings.save.assert_not_called()


@pytest.mark.asyncio
async def test_update_increments_version(mock_uow):
    setting = ModuleSetting(key="module_analytics_enabled_for_user", enabled=True, version=4)
    mock_uow.module_settings.get_by_key.return_value = setting

    result = await UpdateModuleSettingUseCase(mock_uow).execute(
        uuid4(), SystemRole.admin, "analytics", "user", False, expected_version=4
    )

    assert result.is_ok()
    assert result.value.version == 5
    assert result.value.enabled is False


@pytest.mark.asyncio
async def test_award_modules_have_no_settings(mock_uow):
    result = await UpdateModuleSettingUseCase(mock_uow).execute(
        uuid4(), SystemRole.admin, "trophy", "user", True
    )

    assert result.is_err()
    assert result.error.code == "INVALID_MODULE"
