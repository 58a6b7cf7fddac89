"""Auth router - token login, logout and current user."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from contacts_api.core.config import settings
from contacts_api.core.deps import get_current_user, get_db
from contacts_api.core.errors import ValidationFailed
from contacts_api.core.rate_limit import limiter
from contacts_api.schemas.auth import LoginRequest, TokenResponse, UserRead
from contacts_api.services import auth_service

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@limiter.limit(f"{settings.RATE_LIMIT_AUTH}/minute")
def login(
    request: Request,
    data: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Exchange email and password for a bearer token.

    Wrong credentials report against the email field, like any other
    validation failure.
    """
    user = auth_service.authenticate(db, data.email, data.password)
    if not user:
        raise ValidationFailed({"email": ["The provided credentials are incorrect."]})
    return TokenResponse(token=auth_service.issue_token(user, data.device_name))


@router.post("/logout", status_code=204)
def logout(
    user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Revoke every token issued to the current user."""
    auth_service.revoke_tokens(db, user)
    return None


@router.get("/user", response_model=UserRead)
def get_user(user=Depends(get_current_user)):
    """The authenticated user."""
    return UserRead.model_validate(user)
