"""Contact service - business logic for contact operations.

All functions take the caller's account_id explicitly; nothing here reads
tenant information from request state or from client input.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session, selectinload

from contacts_api.core.errors import ValidationFailed
from contacts_api.core.structured_logging import build_log_context
from contacts_api.db.enums import RecordScope
from contacts_api.db.models import Contact, Organization
from contacts_api.schemas.contact import ContactInput
from contacts_api.services.contact_filters import (
    ContactFilters,
    filter_contacts,
    order_by_name,
    scoped_contacts,
)
from contacts_api.utils.pagination import (
    PaginatedResponse,
    PaginationParams,
    paginate_query,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Validation
# =============================================================================

def organization_exists(db: Session, account_id: int, organization_id: int) -> bool:
    """Check the organization exists inside the caller's account."""
    return db.query(Organization.id).filter(
        Organization.id == organization_id,
        Organization.account_id == account_id,
    ).first() is not None


def validate_contact_input(
    db: Session,
    account_id: int,
    payload: Any,
) -> ContactInput:
    """
    Validate a create/update payload.

    Field rules and the organization lookup run in one pass so the
    error mapping names every offending field at once.

    Raises:
        ValidationFailed: with {field: [messages]}
    """
    if not isinstance(payload, dict):
        raise ValidationFailed({"non_field_errors": ["The request body must be a JSON object."]})
    try:
        return ContactInput.model_validate(
            payload,
            context={
                "organization_exists": lambda org_id: organization_exists(db, account_id, org_id),
            },
        )
    except ValidationError as exc:
        raise ValidationFailed.from_pydantic(exc)


# =============================================================================
# Reads
# =============================================================================

def list_contacts(
    db: Session,
    account_id: int,
    filters: ContactFilters,
    pagination: PaginationParams,
    sort: str | None = None,
) -> PaginatedResponse[Contact]:
    """
    List contacts with filters, newest first.

    sort="name" orders by last name then first name instead; any other
    value keeps the default.

    Returns:
        One page of contacts with the total matching count
    """
    query = filter_contacts(db, account_id, filters).options(selectinload(Contact.organization))
    if sort == "name":
        query = order_by_name(query).order_by(Contact.id)
    else:
        query = query.order_by(Contact.created_at.desc(), Contact.id.desc())
    contacts, total = paginate_query(query, pagination)
    return PaginatedResponse.create(contacts, total, pagination)


def get_contact(
    db: Session,
    account_id: int,
    contact_id: int,
    scope: RecordScope = RecordScope.ACTIVE,
) -> Contact | None:
    """Get contact by ID (account-scoped), organization eager loaded."""
    return (
        scoped_contacts(db, account_id, scope)
        .options(selectinload(Contact.organization))
        .filter(Contact.id == contact_id)
        .first()
    )


# =============================================================================
# Writes
# =============================================================================

def _apply_fields(contact: Contact, values: dict[str, Any]) -> None:
    old_status = contact.status
    for field, value in values.items():
        setattr(contact, field, value)
    if "status" in values and values["status"] != old_status:
        contact.status_updated_at = datetime.now(timezone.utc)


def create_contact(
    db: Session,
    account_id: int,
    user_id: int | None,
    data: ContactInput,
) -> Contact:
    """
    Create a contact owned by ``account_id``.

    The account always comes from the caller's session; the input schema
    has no account field to begin with.
    """
    contact = Contact(account_id=account_id)
    _apply_fields(contact, data.model_dump())
    db.add(contact)
    db.commit()
    db.refresh(contact)

    logger.info(
        "Contact created",
        extra=build_log_context(account_id=account_id, user_id=user_id, contact_id=contact.id),
    )
    return contact


def update_contact(
    db: Session,
    contact: Contact,
    user_id: int | None,
    data: ContactInput,
) -> Contact:
    """Apply the fields present in the request to an active contact."""
    _apply_fields(contact, data.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(contact)

    logger.info(
        "Contact updated",
        extra=build_log_context(
            account_id=contact.account_id, user_id=user_id, contact_id=contact.id
        ),
    )
    return contact


def delete_contact(db: Session, contact: Contact, user_id: int | None) -> Contact:
    """Soft-delete a contact (set deleted_at)."""
    contact.soft_delete()
    db.commit()

    logger.info(
        "Contact deleted",
        extra=build_log_context(
            account_id=contact.account_id, user_id=user_id, contact_id=contact.id
        ),
    )
    return contact


def restore_contact(db: Session, contact: Contact, user_id: int | None) -> Contact:
    """Clear deleted_at. Restoring an active contact changes nothing."""
    if not contact.is_trashed:
        return contact

    contact.restore()
    db.commit()

    logger.info(
        "Contact restored",
        extra=build_log_context(
            account_id=contact.account_id, user_id=user_id, contact_id=contact.id
        ),
    )
    return contact
