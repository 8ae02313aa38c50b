"""
Account Use Cases

Quota, capacity, role and award operations on accounts.
"""

from .change_role_use_case import ChangeRoleUseCase
from .check_capacity_use_case import CheckCapacityUseCase
from .dtos import (
    AwardResponse,
    AwardsResponse,
    CapacityCheckResponse,
    ChangeRoleResponse,
    QuotaEntryResponse,
    QuotaSummaryResponse,
)
from .get_quota_use_case import GetQuotaUseCase
from .grant_award_use_case import GrantAwardUseCase
from .list_awards_use_case import ListAwardsUseCase
from .override_quota_use_case import OverrideQuotaUseCase

__all__ = [
    "ChangeRoleUseCase",
    "CheckCapacityUseCase",
    "GetQuotaUseCase",
    "GrantAwardUseCase",
    "ListAwardsUseCase",
    "OverrideQuotaUseCase",
    "AwardResponse",
    "AwardsResponse",
    "CapacityCheckResponse",
    "ChangeRoleResponse",
    "QuotaEntryResponse",
    "QuotaSummaryResponse",
]
