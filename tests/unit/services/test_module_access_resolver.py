from uuid import uuid4

import pytest

from src.app.services.module_access import (
    ModuleSettingsSnapshot,
    accessible_modules,
    can_access,
    load_access_context,
)
from src.domain.entities import AwardType, ModuleSetting, SystemRole
from src.domain.modules import setting_key


def test_defaults_apply_without_settings():
    assert can_access(SystemRole.admin, "partnership_management")
    assert can_access(SystemRole.super_user, "system_users")
    assert not can_access(SystemRole.super_user, "settings")
    assert can_access(SystemRole.user, "access_levels")
    assert not can_access(SystemRole.user, "requests")


def test_explicit_false_overrides_default():
    """A disabled setting wins even when the module is a role default"""
    snapshot = ModuleSettingsSnapshot(values={"module_dashboard_enabled_for_user": False})

    assert not can_access(SystemRole.user, "dashboard", snapshot)
    # Other roles keep their defaults
    assert can_access(SystemRole.admin, "dashboard", snapshot)


def test_explicit_true_grants_non_default_module():
    snapshot = ModuleSettingsSnapshot(values={"module_analytics_enabled_for_user": True})

    assert can_access(SystemRole.user, "analytics", snapshot)


def test_role_given_as_display_label():
    assert can_access("Super User", "system_users")
    assert can_access(" user ", "access_levels")


def test_unknown_role_gets_nothing():
    assert not can_access("Owner", "dashboard")
    assert not can_access(None, "dashboard")


def test_unknown_module_is_denied():
    assert not can_access(SystemRole.admin, "billing")


def test_unreadable_setting_falls_back_to_defaults():
    snapshot = ModuleSettingsSnapshot(values={"module_dashboard_enabled_for_user": "maybe"})

    assert can_access(SystemRole.user, "dashboard", snapshot)


def test_string_setting_values_are_coerced():
    snapshot = ModuleSettingsSnapshot(values={"module_dashboard_enabled_for_user": "false"})

    assert not can_access(SystemRole.user, "dashboard", snapshot)


def test_trophy_requires_award():
    """A User sees Trophy only after a trophy award"""
    assert not can_access(SystemRole.user, "trophy")
    assert can_access(SystemRole.user, "trophy", award_types={AwardType.trophy})
    assert not can_access(SystemRole.user, "certificate", award_types={AwardType.trophy})


def test_award_modules_ignore_settings():
    snapshot = ModuleSettingsSnapshot(values={"module_trophy_enabled_for_user": True})

    assert not can_access(SystemRole.user, "trophy", snapshot)
    assert not can_access(SystemRole.admin, "trophy")


def test_accessible_modules_keep_navigation_order():
    keys = [m.key for m in accessible_modules(SystemRole.user)]

    assert keys == ["dashboard", "attendees", "registration", "access_levels"]


def test_setting_key_format():
    assert setting_key("system_users", SystemRole.super_user) == (
        "module_system_users_enabled_for_super_user"
    )


@pytest.mark.asyncio
async def test_load_access_context_reads_settings_and_awards(mock_uow):
    account_id = uuid4()
    mock_uow.module_settings.list_all.return_value = [
        ModuleSetting(key="module_analytics_enabled_for_user", enabled=True, version=3)
    ]
    mock_uow.awards.get_types_by_account.return_value = {AwardType.certificate}

    snapshot, awards = await load_access_context(mock_uow, account_id)

    assert snapshot.lookup("module_analytics_enabled_for_user") is True
    assert snapshot.versions["module_analytics_enabled_for_user"] == 3
    assert awards == {AwardType.certificate}
    mock_uow.awards.get_types_by_account.assert_called_once_with(account_id)
