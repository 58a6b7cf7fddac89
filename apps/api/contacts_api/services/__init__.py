"""Service layer modules."""

from contacts_api.services.auth_service import (
    authenticate,
    create_account_with_owner,
    issue_token,
    revoke_tokens,
)
from contacts_api.services.contact_filters import ContactFilters, filter_contacts
from contacts_api.services.contact_service import (
    create_contact,
    delete_contact,
    get_contact,
    list_contacts,
    restore_contact,
    update_contact,
    validate_contact_input,
)
from contacts_api.services.dashboard_service import get_contact_stats

__all__ = [
    # Auth
    "authenticate",
    "create_account_with_owner",
    "issue_token",
    "revoke_tokens",
    # Contacts
    "ContactFilters",
    "filter_contacts",
    "create_contact",
    "delete_contact",
    "get_contact",
    "list_contacts",
    "restore_contact",
    "update_contact",
    "validate_contact_input",
    # Dashboard
    "get_contact_stats",
]
