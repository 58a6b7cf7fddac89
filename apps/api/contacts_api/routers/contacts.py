"""Contacts router - API endpoints for contact management."""

import json
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from contacts_api.core.config import settings
from contacts_api.core.deps import get_current_session, get_db
from contacts_api.core.errors import NotFound, ValidationFailed
from contacts_api.db.enums import RecordScope
from contacts_api.schemas.auth import UserSession
from contacts_api.schemas.contact import ContactPage, ContactRead, ContactResponse
from contacts_api.services import contact_service
from contacts_api.services.contact_filters import ContactFilters
from contacts_api.utils.pagination import PaginationParams, fixed_page_size

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _to_response(contact) -> ContactResponse:
    return ContactResponse(data=ContactRead.model_validate(contact))


def _get_or_404(
    db: Session,
    session: UserSession,
    contact_id: int,
    scope: RecordScope = RecordScope.ACTIVE,
):
    contact = contact_service.get_contact(db, session.account_id, contact_id, scope)
    if not contact:
        raise NotFound("Contact")
    return contact


async def raw_body(
    request: Request,
    session: UserSession = Depends(get_current_session),
) -> bytes:
    """Request body, read only once the caller is authenticated."""
    return await request.body()


def _parse_payload(raw: bytes) -> Any:
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationFailed({"non_field_errors": ["The request body must be valid JSON."]})


@router.get("", response_model=ContactPage)
def list_contacts(
    request: Request,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
    pagination: PaginationParams = Depends(fixed_page_size(settings.CONTACTS_PER_PAGE)),
    search: str | None = Query(None),
    trashed: str | None = Query(None, description="'with' adds deleted contacts, 'only' shows just them"),
    status: str | None = Query(None),
    sort: str | None = Query(None, description="'name' sorts by last then first name"),
):
    """
    List contacts with filters and pagination.

    - Default excludes soft-deleted contacts
    - search matches first name, last name or email
    - Newest first unless sort=name, fixed page size
    - Page links keep the other query parameters
    """
    page = contact_service.list_contacts(
        db=db,
        account_id=session.account_id,
        filters=ContactFilters(search=search, trashed=trashed, status=status),
        pagination=pagination,
        sort=sort,
    )
    return ContactPage(
        data=[ContactRead.model_validate(c) for c in page.items],
        links=page.links(request.url),
        meta=page.meta(request.url),
    )


@router.get("/{contact_id}", response_model=ContactResponse)
def get_contact(
    contact_id: int,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    """Get one contact, including soft-deleted ones."""
    contact = _get_or_404(db, session, contact_id, RecordScope.ALL)
    return _to_response(contact)


@router.post("", response_model=ContactResponse, status_code=201)
def create_contact(
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
    body: bytes = Depends(raw_body),
):
    """Create a contact in the caller's account."""
    payload = _parse_payload(body)
    data = contact_service.validate_contact_input(db, session.account_id, payload)
    contact = contact_service.create_contact(
        db=db,
        account_id=session.account_id,
        user_id=session.user_id,
        data=data,
    )
    return _to_response(contact)


@router.put("/{contact_id}", response_model=ContactResponse)
def update_contact(
    contact_id: int,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
    body: bytes = Depends(raw_body),
):
    """
    Update an active contact.

    Trashed contacts have to be restored first.
    """
    contact = _get_or_404(db, session, contact_id)
    data = contact_service.validate_contact_input(db, session.account_id, _parse_payload(body))
    contact = contact_service.update_contact(db, contact, session.user_id, data)
    return _to_response(contact)


@router.delete("/{contact_id}", status_code=204)
def delete_contact(
    contact_id: int,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    """Soft-delete a contact. Already deleted contacts are not found."""
    contact = _get_or_404(db, session, contact_id)
    contact_service.delete_contact(db, contact, session.user_id)
    return None


@router.put("/{contact_id}/restore", status_code=204)
def restore_contact(
    contact_id: int,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    """Restore a soft-deleted contact."""
    contact = _get_or_404(db, session, contact_id, RecordScope.ALL)
    contact_service.restore_contact(db, contact, session.user_id)
    return None
