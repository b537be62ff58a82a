"""create_cooperative_tables

Revision ID: 3f1c9a7b2d40
Revises:
Create Date: 2026-10-19 09:12:03.514230

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7b2d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create enums (only if they don't exist)
    op.execute("DO $$ BEGIN CREATE TYPE transaction_type AS ENUM ('Deposit', 'Withdraw'); EXCEPTION WHEN duplicate_object THEN null; END $$;")
    op.execute("DO $$ BEGIN CREATE TYPE session_kind AS ENUM ('cooperative', 'admin', 'registration'); EXCEPTION WHEN duplicate_object THEN null; END $$;")
    transaction_type = postgresql.ENUM('Deposit', 'Withdraw', name='transaction_type', create_type=False)
    session_kind = postgresql.ENUM('cooperative', 'admin', 'registration', name='session_kind', create_type=False)

    op.create_table(
        'criteria',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('financial_performance_points', sa.Integer(), nullable=False),
        sa.Column('organization_management_points', sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'criteria_fields',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('criteria_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('max_points', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['criteria_id'], ['criteria.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'cooperative_categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('required_assets', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('criteria_id', sa.Uuid(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['criteria_id'], ['criteria.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'cooperatives',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('registration_number', sa.String(length=100), nullable=False),
        sa.Column('registration_date', sa.Date(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('initials', sa.String(length=50), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['category_id'], ['cooperative_categories.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'cooperative_accounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cooperative_id', sa.Uuid(), nullable=False),
        sa.Column('given_name', sa.String(length=100), nullable=False),
        sa.Column('middle_name', sa.String(length=100), nullable=False),
        sa.Column('surname', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['cooperative_id'], ['cooperatives.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cooperative_id'),
        sa.UniqueConstraint('email')
    )
    op.create_table(
        'admin_accounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_table(
        'cooperative_scores',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cooperative_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('financial_performance_points', sa.Integer(), nullable=False),
        sa.Column('organization_management_points', sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['cooperative_id'], ['cooperatives.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['cooperative_categories.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cooperative_id', 'category_id', name='unique_cooperative_score')
    )
    op.create_table(
        'criteria_field_points',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cooperative_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('criteria_field_id', sa.Uuid(), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['cooperative_id'], ['cooperatives.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['cooperative_categories.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['criteria_field_id'], ['criteria_fields.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'cooperative_id', 'category_id', 'criteria_field_id', name='unique_criteria_field_point'
        )
    )
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cooperative_id', sa.Uuid(), nullable=False),
        sa.Column('given_name', sa.String(length=100), nullable=False),
        sa.Column('middle_name', sa.String(length=100), nullable=False),
        sa.Column('surname', sa.String(length=100), nullable=False),
        sa.Column('birthday', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=30), nullable=False),
        sa.Column('educational_attainment', sa.String(length=100), nullable=False),
        sa.Column('civil_status', sa.String(length=30), nullable=False),
        sa.Column('tin', sa.String(length=30), nullable=True),
        sa.Column('spouse_name', sa.String(length=150), nullable=True),
        sa.Column('present_address', sa.String(length=255), nullable=False),
        sa.Column('provincial_address', sa.String(length=255), nullable=True),
        sa.Column('office_address', sa.String(length=255), nullable=True),
        sa.Column('office_phone_number', sa.String(length=30), nullable=True),
        sa.Column('registration_fee', sa.Numeric(precision=12, scale=2), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['cooperative_id'], ['cooperatives.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'member_accounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('mobile_number', sa.String(length=20), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('member_id')
    )
    op.create_table(
        'dependents',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('relationship', sa.String(length=50), nullable=False),
        sa.Column('birthday', sa.Date(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    for table in ('share_transactions', 'saving_transactions'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('member_id', sa.Integer(), nullable=False),
            sa.Column('type', transaction_type, nullable=False),
            sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
            sa.Column('remarks', sa.String(length=255), nullable=True),
            *_audit_columns(),
            sa.ForeignKeyConstraint(['member_id'], ['members.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(f'ix_{table}_member_id', table, ['member_id'])
    op.create_table(
        'loans',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('interest', sa.Integer(), nullable=False),
        sa.Column('tenure', sa.Integer(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_loans_member_id', 'loans', ['member_id'])
    op.create_table(
        'repayments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('loan_id', sa.Uuid(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('remarks', sa.String(length=255), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['loan_id'], ['loans.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_repayments_loan_id', 'repayments', ['loan_id'])
    op.create_table(
        'rewards',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('certificate_type', sa.String(length=150), nullable=False),
        sa.Column('certificate_description', sa.Text(), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'given_rewards',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('reward_id', sa.Uuid(), nullable=False),
        sa.Column('cooperative_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['reward_id'], ['rewards.id']),
        sa.ForeignKeyConstraint(['cooperative_id'], ['cooperatives.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'sessions',
        sa.Column('sid', sa.String(length=36), nullable=False),
        sa.Column('kind', session_kind, nullable=False),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('sid')
    )
    op.create_index('ix_sessions_expires_at', 'sessions', ['expires_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_sessions_expires_at', table_name='sessions')
    op.drop_table('sessions')
    op.drop_table('given_rewards')
    op.drop_table('rewards')
    op.drop_index('ix_repayments_loan_id', table_name='repayments')
    op.drop_table('repayments')
    op.drop_index('ix_loans_member_id', table_name='loans')
    op.drop_table('loans')
    for table in ('saving_transactions', 'share_transactions'):
        op.drop_index(f'ix_{table}_member_id', table_name=table)
        op.drop_table(table)
    op.drop_table('dependents')
    op.drop_table('member_accounts')
    op.drop_table('members')
    op.drop_table('criteria_field_points')
    op.drop_table('cooperative_scores')
    op.drop_table('admin_accounts')
    op.drop_table('cooperative_accounts')
    op.drop_table('cooperatives')
    op.drop_table('cooperative_categories')
    op.drop_table('criteria_fields')
    op.drop_table('criteria')
    op.execute("DROP TYPE IF EXISTS session_kind")
    op.execute("DROP TYPE IF EXISTS transaction_type")
