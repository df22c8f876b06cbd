"""Add lenders and taken_loans tables

Revision ID: 7c1e5a9d2b40
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1e5a9d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ============================================================
    # Lender Profiles Table
    # ============================================================
    op.create_table('lenders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lender_id', sa.String(length=64), nullable=False),
        sa.Column('added_by', sa.String(length=64), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'CLOSED', name='lenderstatus'), nullable=False),
        sa.Column('closed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_lenders_id'), 'lenders', ['id'], unique=False)
    op.create_index(op.f('ix_lenders_lender_id'), 'lenders', ['lender_id'], unique=True)
    op.create_index(op.f('ix_lenders_added_by'), 'lenders', ['added_by'], unique=False)

    # ============================================================
    # Taken Loans Table
    # ============================================================
    # lender_id carries no foreign key: other borrowers' loans may outlive the lender profile
    op.create_table('taken_loans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('lender_id', sa.String(length=64), nullable=False),
        sa.Column('borrowed_by', sa.String(length=64), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'CLOSED', name='loanstatus'), nullable=False),
        sa.Column('closed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('principal_amount', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('interest_rate', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('accrued_interest', sa.Numeric(precision=15, scale=2), nullable=False, server_default='0.00'),
        sa.Column('interest_stopped', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('interest_stopped_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_taken_loans_id'), 'taken_loans', ['id'], unique=False)
    op.create_index(op.f('ix_taken_loans_lender_id'), 'taken_loans', ['lender_id'], unique=False)
    op.create_index(op.f('ix_taken_loans_borrowed_by'), 'taken_loans', ['borrowed_by'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_taken_loans_borrowed_by'), table_name='taken_loans')
    op.drop_index(op.f('ix_taken_loans_lender_id'), table_name='taken_loans')
    op.drop_index(op.f('ix_taken_loans_id'), table_name='taken_loans')
    op.drop_table('taken_loans')
    op.drop_index(op.f('ix_lenders_added_by'), table_name='lenders')
    op.drop_index(op.f('ix_lenders_lender_id'), table_name='lenders')
    op.drop_index(op.f('ix_lenders_id'), table_name='lenders')
    op.drop_table('lenders')
    sa.Enum(name='loanstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='lenderstatus').drop(op.get_bind(), checkfirst=True)
