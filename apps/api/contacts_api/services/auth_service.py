"""Auth service - credential checks, token issue and revocation."""

import logging

from sqlalchemy.orm import Session

from contacts_api.core.security import create_access_token, hash_password, verify_password
from contacts_api.core.structured_logging import build_log_context
from contacts_api.db.models import Account, User
from contacts_api.utils.normalization import normalize_email

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> User | None:
    """Return the active user matching the credentials, or None."""
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.password):
        return None
    return user


def issue_token(user: User, device_name: str | None = None) -> str:
    """Issue a bearer token bound to the user's current token_version."""
    token = create_access_token(
        user_id=user.id,
        account_id=user.account_id,
        token_version=user.token_version,
        device_name=device_name,
    )
    logger.info(
        "Token issued",
        extra=build_log_context(user_id=user.id, account_id=user.account_id),
    )
    return token


def revoke_tokens(db: Session, user: User) -> None:
    """Invalidate every token issued to the user so far."""
    user.token_version += 1
    db.commit()
    logger.info(
        "Tokens revoked",
        extra=build_log_context(user_id=user.id, account_id=user.account_id),
    )


def create_account_with_owner(
    db: Session,
    account_name: str,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
) -> tuple[Account, User]:
    """
    Create a tenant and its owner user.

    Raises:
        ValueError: If a user with that email already exists
    """
    email = normalize_email(email)
    if db.query(User.id).filter(User.email == email).first():
        raise ValueError(f"User {email} already exists")

    account = Account(name=account_name)
    db.add(account)
    db.flush()

    user = User(
        account_id=account.id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=hash_password(password),
        owner=True,
    )
    db.add(user)
    db.commit()
    db.refresh(account)
    db.refresh(user)
    return account, user
