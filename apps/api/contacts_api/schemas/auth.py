"""Authentication-related Pydantic schemas."""

from pydantic import BaseModel, Field


class UserSession(BaseModel):
    """
    Session context for authenticated requests.

    Returned by the get_current_session dependency; account_id is the
    tenant every query must be scoped to.
    """
    user_id: int
    account_id: int
    email: str
    name: str
    owner: bool = False


class LoginRequest(BaseModel):
    """Token login request."""
    email: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    device_name: str = Field(..., min_length=1, max_length=255)


class TokenResponse(BaseModel):
    """Bearer token issued on login."""
    token: str
    token_type: str = "Bearer"


class UserRead(BaseModel):
    """Response schema for GET /user."""
    id: int
    account_id: int
    first_name: str
    last_name: str
    name: str
    email: str
    owner: bool

    model_config = {"from_attributes": True}
