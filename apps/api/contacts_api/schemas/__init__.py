"""Pydantic schemas for API request/response models."""

from contacts_api.schemas.auth import LoginRequest, TokenResponse, UserRead, UserSession
from contacts_api.schemas.contact import (
    ContactInput,
    ContactPage,
    ContactRead,
    ContactResponse,
    OrganizationRef,
)
from contacts_api.schemas.dashboard import DashboardStats

__all__ = [
    # Auth
    "LoginRequest",
    "TokenResponse",
    "UserRead",
    "UserSession",
    # Contacts
    "ContactInput",
    "ContactPage",
    "ContactRead",
    "ContactResponse",
    "OrganizationRef",
    # Dashboard
    "DashboardStats",
]
