"""FastAPI dependencies for authentication and database access."""

from typing import Generator

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from contacts_api.core.errors import Unauthenticated
from contacts_api.core.security import decode_access_token
from contacts_api.db.session import SessionLocal
from contacts_api.schemas.auth import UserSession

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields a database session and ensures it's closed after the request.
    Uncommitted work is rolled back if the request fails.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
):
    """
    Get authenticated user from the Authorization bearer token.

    Validates:
    - Bearer token is present
    - JWT is valid and not expired
    - User exists and is active
    - Token version matches (for revocation support)

    Raises:
        Unauthenticated: Authentication failed (401)
    """
    from contacts_api.db.models import User

    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Missing bearer token")

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise Unauthenticated("Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise Unauthenticated("User not found")

    if not user.is_active:
        raise Unauthenticated("Account disabled")

    if user.token_version != payload.get("token_version"):
        raise Unauthenticated("Token revoked")

    return user


def get_current_session(user=Depends(get_current_user)) -> UserSession:
    """
    Get session context: user_id and account_id.

    This is the PRIMARY auth dependency for most endpoints. account_id comes
    from the stored user, never from the request or the token body.
    """
    return UserSession(
        user_id=user.id,
        account_id=user.account_id,
        email=user.email,
        name=user.name,
        owner=user.owner,
    )


def get_account_scope(session: UserSession = Depends(get_current_session)) -> int:
    """
    Get account_id for query scoping.

    Every list/detail query MUST filter by this value
    to ensure proper tenant isolation.
    """
    return session.account_id
