"""Enum definitions for application constants."""

from enum import Enum


class ContactState(str, Enum):
    """Soft-delete lifecycle of a contact."""
    ACTIVE = "active"
    DELETED = "deleted"


class RecordScope(str, Enum):
    """
    Which rows a soft-deletable query sees.

    - ACTIVE: only rows without deleted_at (default)
    - TRASHED: only soft-deleted rows
    - ALL: both
    """
    ACTIVE = "active"
    TRASHED = "trashed"
    ALL = "all"

    @classmethod
    def from_trashed_param(cls, value: str | None) -> "RecordScope":
        """Map the ``trashed`` query parameter ("with" / "only") to a scope."""
        if value == "with":
            return cls.ALL
        if value == "only":
            return cls.TRASHED
        return cls.ACTIVE
