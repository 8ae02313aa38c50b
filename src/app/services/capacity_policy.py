"""
Capacity Policy

What happens when a category's consumption would exceed its total. The core
never decides this on its own: the policy is injected (CAPACITY_POLICY).
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class CapacityDecision(BaseModel):
    allowed: bool
    warning: Optional[str] = None


class CapacityPolicy(ABC):
    name: str

    @abstractmethod
    def evaluate(
        self, category: str, available: Optional[int], requested: int
    ) -> CapacityDecision:
        """``available`` is None for unlimited accounts"""
        pass


class AdvisoryCapacityPolicy(CapacityPolicy):
    """Over-capacity is allowed and reported as a warning"""

    name = "advisory"

    def evaluate(self, category, available, requested):
        if available is None or requested <= available:
            return CapacityDecision(allowed=True)
        return CapacityDecision(
            allowed=True,
            warning=f"{requested} {category} slot(s) requested but only {available} available",
        )


class StrictCapacityPolicy(CapacityPolicy):
    """Over-capacity is refused"""

    name = "strict"

    def evaluate(self, category, available, requested):
        if available is None or requested <= available:
            return CapacityDecision(allowed=True)
        return CapacityDecision(
            allowed=False,
            warning=f"{requested} {category} slot(s) requested but only {available} available",
        )


_POLICIES = {
    AdvisoryCapacityPolicy.name: AdvisoryCapacityPolicy,
    StrictCapacityPolicy.name: StrictCapacityPolicy,
}


def build_capacity_policy(name: str) -> CapacityPolicy:
    try:
        return _POLICIES[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown capacity policy: {name}. Must be one of: {', '.join(_POLICIES)}"
        ) from None
