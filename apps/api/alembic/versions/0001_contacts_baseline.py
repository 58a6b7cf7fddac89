"""Baseline migration - tenants, users, organizations and contacts

Revision ID: 0001_contacts_baseline
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_contacts_baseline'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create tenant, auth and CRM tables."""

    # ==========================================================================
    # Accounts
    # ==========================================================================
    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        *_timestamps(),
    )

    # ==========================================================================
    # Users
    # ==========================================================================
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('account_id', sa.Integer(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('first_name', sa.String(25), nullable=False),
        sa.Column('last_name', sa.String(25), nullable=False),
        sa.Column('email', sa.String(50), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=True),
        sa.Column('owner', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('token_version', sa.Integer(), server_default=sa.text('1'), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_account_id', 'users', ['account_id'])

    # ==========================================================================
    # Organizations
    # ==========================================================================
    op.create_table(
        'organizations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('account_id', sa.Integer(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(50), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('city', sa.String(50), nullable=True),
        sa.Column('region', sa.String(50), nullable=True),
        sa.Column('country', sa.String(2), nullable=True),
        sa.Column('postal_code', sa.String(25), nullable=True),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_organizations_account_id', 'organizations', ['account_id'])

    # ==========================================================================
    # Contacts
    # ==========================================================================
    op.create_table(
        'contacts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('account_id', sa.Integer(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'organization_id',
            sa.Integer(),
            sa.ForeignKey('organizations.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(50), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('address', sa.String(150), nullable=True),
        sa.Column('city', sa.String(50), nullable=True),
        sa.Column('region', sa.String(50), nullable=True),
        sa.Column('country', sa.String(2), nullable=True),
        sa.Column('postal_code', sa.String(25), nullable=True),
        sa.Column('status', sa.String(25), nullable=True),
        sa.Column('status_notes', sa.String(255), nullable=True),
        sa.Column('status_updated_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_contacts_account_created', 'contacts', ['account_id', 'created_at'])
    op.create_index('idx_contacts_account_deleted', 'contacts', ['account_id', 'deleted_at'])
    op.create_index('idx_contacts_organization', 'contacts', ['organization_id'])


def downgrade() -> None:
    op.drop_index('idx_contacts_organization', table_name='contacts')
    op.drop_index('idx_contacts_account_deleted', table_name='contacts')
    op.drop_index('idx_contacts_account_created', table_name='contacts')
    op.drop_table('contacts')
    op.drop_index('ix_organizations_account_id', table_name='organizations')
    op.drop_table('organizations')
    op.drop_index('ix_users_account_id', table_name='users')
    op.drop_table('users')
    op.drop_table('accounts')
