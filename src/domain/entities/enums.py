"""
Capacity Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class SystemRole(str, Enum):
    """System role of an account"""

    admin = "admin"
    super_user = "super_user"
    user = "user"

    @classmethod
    def parse(cls, value) -> "SystemRole":
        """
        Normalize a role given as free text.

        Accepts the slug ("super_user") as well as the display label
        ("Super User"), in any case and with surrounding whitespace.

        Raises:
            ValueError: if the value does not name a known role
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid role: {value!r}")
        slug = "_".join(value.strip().lower().replace("-", " ").split())
        return cls(slug)

    @property
    def slug(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]

    @property
    def has_unlimited_quota(self) -> bool:
        return self in (SystemRole.admin, SystemRole.super_user)


_ROLE_LABELS = {
    SystemRole.admin: "Admin",
    SystemRole.super_user: "Super User",
    SystemRole.user: "User",
}


class SlotRequestStatus(str, Enum):
    """Slot request workflow status"""

    pending = "pending"
    approved = "approved"
    declined = "declined"


class AwardType(str, Enum):
    """Recognition awards that unlock award-gated modules"""

    trophy = "trophy"
    certificate = "certificate"
