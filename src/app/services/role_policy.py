"""
Who may act on whose account.

- Admin acts on anyone
- Super User acts on User accounts and on itself
- User acts only on itself
"""

from uuid import UUID

from src.domain.entities import SystemRole


def can_act_on(
    actor_id: UUID, actor_role: SystemRole, target_id: UUID, target_role: SystemRole
) -> bool:
    if actor_role == SystemRole.admin:
        return True
    if actor_id == target_id:
        return True
    if actor_role == SystemRole.super_user:
        return target_role == SystemRole.user
    return False


def can_manage_accounts(actor_role: SystemRole) -> bool:
    """Whether the role acts on accounts other than its own"""
    return actor_role in (SystemRole.admin, SystemRole.super_user)
