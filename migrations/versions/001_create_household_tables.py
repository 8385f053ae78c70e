"""Create household expense tables

Revision ID: 001_create_household_tables
Revises:
Create Date: 2025-01-06

Creates expenses, categories, split_settings and historical_expenses.
historical_expenses carries a unique (expense_name, year) constraint so
year-transition snapshots can use insert-if-absent.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001_create_household_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('frequency', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('is_variable', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_income', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('icon', sa.String(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('variable_month', sa.Integer(), nullable=True),
        sa.Column('variable_year', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_expenses_created_at', 'expenses', ['created_at'])

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('icon', sa.String(), nullable=False, server_default='ellipsis-h'),
        sa.Column('color', sa.String(), nullable=False, server_default='gray'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'split_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user1_name', sa.String(), nullable=False),
        sa.Column('user1_percentage', sa.Integer(), nullable=False),
        sa.Column('user1_profile_image', sa.String(), nullable=True),
        sa.Column('user2_name', sa.String(), nullable=False),
        sa.Column('user2_percentage', sa.Integer(), nullable=False),
        sa.Column('user2_profile_image', sa.String(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'historical_expenses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('expense_name', sa.String(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('frequency', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('expense_name', 'year', name='uq_historical_expenses_name_year'),
    )
    op.create_index('idx_historical_expenses_year', 'historical_expenses', ['year'])


def downgrade() -> None:
    op.drop_index('idx_historical_expenses_year', table_name='historical_expenses')
    op.drop_table('historical_expenses')
    op.drop_table('split_settings')
    op.drop_table('categories')
    op.drop_index('ix_expenses_created_at', table_name='expenses')
    op.drop_table('expenses')
