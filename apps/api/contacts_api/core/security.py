"""Security utilities for password hashing and bearer tokens."""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from contacts_api.core.config import settings


# =============================================================================
# Passwords
# =============================================================================

def hash_password(raw_password: str) -> str:
    """Hash a plaintext password with bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(raw_password: str, hashed_password: str | None) -> bool:
    """Check a plaintext password against its stored hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            raw_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# =============================================================================
# Bearer Token (JWT)
# =============================================================================

def create_access_token(
    user_id: int,
    account_id: int,
    token_version: int,
    device_name: str | None = None,
) -> str:
    """
    Create signed bearer JWT.

    Always signs with current secret (JWT_SECRET).
    Token carries user identity, tenant and revocation version.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "account_id": account_id,
        "token_version": token_version,
        "iat": now,
        "exp": now + timedelta(hours=settings.JWT_EXPIRES_HOURS),
    }
    if device_name:
        payload["device"] = device_name
    return jwt.encode(payload, settings.JWT_SECRET, algorithm="HS256")


def decode_access_token(token: str) -> dict:
    """
    Decode and verify bearer JWT.

    Tries current secret first, then previous (for rotation support).

    Raises:
        jwt.InvalidTokenError: If token invalid with all secrets
    """
    last_error = None
    for secret in settings.jwt_secrets:
        try:
            return jwt.decode(token, secret, algorithms=["HS256"])
        except jwt.InvalidTokenError as e:
            last_error = e
            continue
    raise last_error  # type: ignore
