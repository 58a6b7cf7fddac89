"""Query composition for contact lists: tenant scope, soft-delete scope, filters."""

from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from contacts_api.db.enums import RecordScope
from contacts_api.db.models import Contact
from contacts_api.utils.normalization import escape_like


@dataclass(frozen=True)
class ContactFilters:
    """Filter values as they arrive on the list endpoint."""
    search: str | None = None
    trashed: str | None = None
    status: str | None = None

    @property
    def scope(self) -> RecordScope:
        return RecordScope.from_trashed_param(self.trashed)


def scoped_contacts(
    db: Session,
    account_id: int,
    scope: RecordScope = RecordScope.ACTIVE,
) -> Query:
    """Contacts of one account, restricted to the requested soft-delete scope."""
    query = db.query(Contact).filter(Contact.account_id == account_id)
    if scope is RecordScope.ACTIVE:
        query = query.filter(Contact.deleted_at.is_(None))
    elif scope is RecordScope.TRASHED:
        query = query.filter(Contact.deleted_at.isnot(None))
    return query


def apply_search(query: Query, search: str | None) -> Query:
    """Substring match on first name, last name or email, case-insensitive."""
    if not search:
        return query
    pattern = f"%{escape_like(search)}%"
    return query.filter(
        or_(
            Contact.first_name.ilike(pattern, escape="\\"),
            Contact.last_name.ilike(pattern, escape="\\"),
            Contact.email.ilike(pattern, escape="\\"),
        )
    )


def apply_status(query: Query, status: str | None) -> Query:
    if not status:
        return query
    return query.filter(Contact.status == status)


def filter_contacts(db: Session, account_id: int, filters: ContactFilters) -> Query:
    """
    Compose every filter into one account-scoped query.

    Filters combine with AND; empty values add no constraint.
    No ordering is applied here.
    """
    query = scoped_contacts(db, account_id, filters.scope)
    query = apply_search(query, filters.search)
    query = apply_status(query, filters.status)
    return query


def order_by_name(query: Query) -> Query:
    """Alphabetical by last name, then first name."""
    return query.order_by(Contact.last_name, Contact.first_name)
