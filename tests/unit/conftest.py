import pytest
from unittest.mock import AsyncMock, MagicMock


async def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; writes return what they were given"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.list_ids_by_partnership_type = AsyncMock(return_value=[])
    uow.accounts.list_ids_by_role = AsyncMock(return_value=[])
    uow.accounts.update = AsyncMock(side_effect=_echo)

    uow.quotas = MagicMock()
    uow.quotas.get = AsyncMock(return_value=None)
    uow.quotas.get_for_update = AsyncMock(return_value=None)
    uow.quotas.list_by_account = AsyncMock(return_value=[])
    uow.quotas.save = AsyncMock(side_effect=_echo)
    uow.quotas.delete_by_account = AsyncMock(return_value=0)

    uow.module_settings = MagicMock()
    uow.module_settings.list_all = AsyncMock(return_value=[])
    uow.module_settings.get_by_key = AsyncMock(return_value=None)
    uow.module_settings.save = AsyncMock(side_effect=_echo)

    uow.templates = MagicMock()
    uow.templates.get_by_name = AsyncMock(return_value=None)
    uow.templates.list_all = AsyncMock(return_value=[])
    uow.templates.create = AsyncMock(side_effect=_echo)
    uow.templates.update = AsyncMock(side_effect=_echo)
    uow.templates.delete = AsyncMock()

    uow.slot_requests = MagicMock()
    uow.slot_requests.get_by_id = AsyncMock(return_value=None)
    uow.slot_requests.list_requests = AsyncMock(return_value=[])
    uow.slot_requests.create = AsyncMock(side_effect=_echo)
    uow.slot_requests.decide = AsyncMock(return_value=True)

    uow.awards = MagicMock()
    uow.awards.list_by_account = AsyncMock(return_value=[])
    uow.awards.get_types_by_account = AsyncMock(return_value=set())
    uow.awards.create = AsyncMock(side_effect=_echo)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_echo)
    uow.audit_events.get_paginated = AsyncMock(return_value=([], None))

    return uow
