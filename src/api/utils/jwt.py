from datetime import UTC, datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.entities import SystemRole

ALGORITHM = "HS256"


def generate_jwt(account_id: UUID, role: SystemRole) -> str:
    """
    Generate JWT access token for an account

    Args:
        account_id: Account UUID
        role: System role, stored as its slug (admin, super_user, user)

    Returns:
        JWT token string, expiring after ACCESS_TOKEN_MINUTES
    """
    expires_delta = timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_MINUTES)
    return create_access_token(str(account_id), SystemRole.parse(role).slug, expires_delta)


def create_access_token(account_id: str, role: str, expires_delta: timedelta) -> str:
    now = datetime.now(UTC)
    payload = {
        "account_id": account_id,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """Decoded payload, or None when the signature or expiry is invalid"""
    try:
        return jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None


def read_identity_claims(token: str) -> Optional[Tuple[UUID, SystemRole]]:
    """
    Account id and role carried by a token.

    Returns None for invalid tokens and for tokens whose claims do not name
    an account and a known role. Roles are trusted as issued; a role change
    takes effect when the account's next token is issued.
    """
    payload = verify_jwt(token)
    if payload is None:
        return None
    try:
        return UUID(payload["account_id"]), SystemRole.parse(payload["role"])
    except (KeyError, ValueError, TypeError):
        return None
