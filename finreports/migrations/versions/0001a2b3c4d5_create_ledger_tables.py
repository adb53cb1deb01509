"""create_ledger_tables

Revision ID: 0001a2b3c4d5
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001a2b3c4d5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

cash_flow_type = sa.Enum('OPERATING', 'INVESTING', 'FINANCING', name='cashflowtype')
account_role = sa.Enum('INVENTORY', 'RECEIVABLE', 'PAYABLE', 'DEPRECIATION', name='accountrole')
entry_status = sa.Enum('DRAFT', 'POSTED', name='entrystatus')


def upgrade() -> None:
    """Create accounts, journal_entries and journal_entry_lines."""
    op.create_table(
        'accounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('name_en', sa.String(length=255), nullable=True),
        sa.Column('parent_id', sa.Uuid(), nullable=True),
        sa.Column('level', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('is_parent', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('cash_flow_type', cash_flow_type, nullable=True),
        sa.Column('semantic_role', account_role, nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['parent_id'], ['accounts.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )
    op.create_index('ix_accounts_code', 'accounts', ['code'])
    op.create_index('ix_accounts_parent', 'accounts', ['parent_id'])

    op.create_table(
        'journal_entries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('entry_number', sa.String(length=50), nullable=False),
        sa.Column('entry_date', sa.Date(), nullable=False),
        sa.Column('status', entry_status, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_journal_entries_date', 'journal_entries', ['entry_date'])
    op.create_index('ix_journal_entries_status', 'journal_entries', ['status'])

    op.create_table(
        'journal_entry_lines',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('journal_entry_id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Uuid(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('debit', sa.Numeric(precision=20, scale=4), nullable=False, server_default='0'),
        sa.Column('credit', sa.Numeric(precision=20, scale=4), nullable=False, server_default='0'),
        sa.CheckConstraint('debit >= 0', name='ck_line_debit_non_negative'),
        sa.CheckConstraint('credit >= 0', name='ck_line_credit_non_negative'),
        sa.ForeignKeyConstraint(['journal_entry_id'], ['journal_entries.id']),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_lines_journal', 'journal_entry_lines', ['journal_entry_id'])
    op.create_index('ix_lines_account', 'journal_entry_lines', ['account_id'])


def downgrade() -> None:
    """Drop the ledger tables."""
    op.drop_index('ix_lines_account', table_name='journal_entry_lines')
    op.drop_index('ix_lines_journal', table_name='journal_entry_lines')
    op.drop_table('journal_entry_lines')
    op.drop_index('ix_journal_entries_status', table_name='journal_entries')
    op.drop_index('ix_journal_entries_date', table_name='journal_entries')
    op.drop_table('journal_entries')
    op.drop_index('ix_accounts_parent', table_name='accounts')
    op.drop_index('ix_accounts_code', table_name='accounts')
    op.drop_table('accounts')
    entry_status.drop(op.get_bind(), checkfirst=True)
    account_role.drop(op.get_bind(), checkfirst=True)
    cash_flow_type.drop(op.get_bind(), checkfirst=True)
