"""add audit_log table

Revision ID: 7d4e0b5a2c81
Revises: 3c9a1f2e7b10
Create Date: 2025-03-02
"""

from alembic import op
import sqlalchemy as sa


revision = '7d4e0b5a2c81'
down_revision = '3c9a1f2e7b10'
branch_labels = None
depends_on = None


def _has_table(table_name: str) -> bool:
    inspector = sa.inspect(op.get_bind())
    return inspector.has_table(table_name)


def upgrade():
    if _has_table('audit_log'):
        return
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('action', sa.String(length=80), nullable=False),
        sa.Column('entity', sa.String(length=80), nullable=False),
        sa.Column('entity_id', sa.String(length=80), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
    )


def downgrade():
    if _has_table('audit_log'):
        op.drop_table('audit_log')
