"""SQLAlchemy ORM models for tenants, users, organizations and contacts."""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from contacts_api.db.base import Base
from contacts_api.db.enums import ContactState
from contacts_api.db.types import utc_now
from contacts_api.utils.normalization import format_phone


# =============================================================================
# Tenant Models
# =============================================================================

class Account(Base):
    """
    A tenant in the multi-tenant system.

    Contacts, organizations and users all belong to an account
    and must be scoped by account_id in all queries.
    """
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False
    )

    # Relationships
    users: Mapped[list["User"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
    )
    organizations: Mapped[list["Organization"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
    )
    contacts: Mapped[list["Contact"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
    )


class User(Base):
    """
    A person who can log in to an account.

    Issued bearer tokens carry token_version; bumping it revokes
    every token handed out before.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(25), nullable=False)
    last_name: Mapped[str] = mapped_column(String(25), nullable=False)
    email: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=text("false"), nullable=False
    )
    token_version: Mapped[int] = mapped_column(
        Integer, default=1, server_default=text("1"), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=text("true"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False
    )

    account: Mapped["Account"] = relationship(back_populates="users")

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# =============================================================================
# CRM Models
# =============================================================================

class Organization(Base):
    """Company a contact works for. Referenced by contacts, managed elsewhere."""
    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    city: Mapped[str | None] = mapped_column(String(50), nullable=True)
    region: Mapped[str | None] = mapped_column(String(50), nullable=True)
    country: Mapped[str | None] = mapped_column(String(2), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(25), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(nullable=True)

    account: Mapped["Account"] = relationship(back_populates="organizations")
    contacts: Mapped[list["Contact"]] = relationship(back_populates="organization")


class Contact(Base):
    """
    A person tracked by the CRM.

    Soft-deleted via deleted_at: trashed rows stay in the table
    and come back with restore().
    """
    __tablename__ = "contacts"
    __table_args__ = (
        Index("idx_contacts_account_created", "account_id", "created_at"),
        Index("idx_contacts_account_deleted", "account_id", "deleted_at"),
        Index("idx_contacts_organization", "organization_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="SET NULL"),
        nullable=True,
    )

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(150), nullable=True)
    city: Mapped[str | None] = mapped_column(String(50), nullable=True)
    region: Mapped[str | None] = mapped_column(String(50), nullable=True)
    country: Mapped[str | None] = mapped_column(String(2), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(25), nullable=True)

    status: Mapped[str | None] = mapped_column(String(25), nullable=True)
    status_notes: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status_updated_at: Mapped[datetime | None] = mapped_column(nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(nullable=True)

    account: Mapped["Account"] = relationship(back_populates="contacts")
    organization: Mapped[Organization | None] = relationship(back_populates="contacts")

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def state(self) -> ContactState:
        return ContactState.DELETED if self.deleted_at is not None else ContactState.ACTIVE

    @property
    def is_trashed(self) -> bool:
        return self.state is ContactState.DELETED

    @validates("phone")
    def _normalize_phone(self, key, value):
        return format_phone(value)

    def soft_delete(self, at: datetime | None = None) -> None:
        self.deleted_at = at or utc_now()

    def restore(self) -> None:
        self.deleted_at = None
