"""Pydantic schemas for contacts."""

from datetime import datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    BaseModel,
    Field,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

from contacts_api.utils.pagination import PageLinks, PageMeta


class ContactInput(BaseModel):
    """
    Request schema for creating or updating a contact.

    Unknown keys (including account_id) are ignored. Strings are trimmed and
    empty strings count as null. Phone is normalized by the model, not here.

    organization_id is checked against ``context["organization_exists"]``
    when the caller supplies it, so the existence check fails together with
    every other field instead of after them.
    """

    first_name: str = Field(..., max_length=50)
    last_name: str = Field(..., max_length=50)
    organization_id: int | None = None
    email: str | None = Field(None, max_length=50)
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=150)
    city: str | None = Field(None, max_length=50)
    region: str | None = Field(None, max_length=50)
    country: str | None = Field(None, max_length=2)
    postal_code: str | None = Field(None, max_length=25)
    status: str | None = Field(None, max_length=25)
    status_notes: str | None = Field(None, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip() or None
            cleaned[key] = value
        return cleaned

    @field_validator("email")
    @classmethod
    def validate_email_shape(cls, v: str | None) -> str | None:
        if v is None:
            return None
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("The email field must be a valid email address.")
        return v

    @field_validator("organization_id")
    @classmethod
    def validate_organization(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is None:
            return None
        exists = (info.context or {}).get("organization_exists")
        if exists is not None and not exists(v):
            raise ValueError("The selected organization id is invalid.")
        return v


class OrganizationRef(BaseModel):
    """Organization as embedded in a contact resource."""

    id: int
    name: str

    model_config = {"from_attributes": True}


# Fields dropped from the output when empty; everything else is always present.
OMITTED_WHEN_EMPTY = ("organization", "deleted_at")


class ContactRead(BaseModel):
    """Contact resource. Never carries account_id."""

    id: int
    name: str
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None
    postal_code: str | None = None
    status: str | None = None
    status_notes: str | None = None
    status_updated_at: datetime | None = None
    organization: OrganizationRef | None = None
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @model_serializer(mode="wrap")
    def omit_empty_optionals(self, handler):
        data = handler(self)
        for key in OMITTED_WHEN_EMPTY:
            if data.get(key) is None:
                data.pop(key, None)
        return data


class ContactResponse(BaseModel):
    """Single contact envelope."""

    data: ContactRead


class ContactPage(BaseModel):
    """Paginated contact list envelope."""

    data: list[ContactRead]
    links: PageLinks
    meta: PageMeta
