"""create user and site content tables

Revision ID: 3c9a1f2e7b10
Revises:
Create Date: 2025-02-10
"""

from alembic import op
import sqlalchemy as sa


revision = '3c9a1f2e7b10'
down_revision = None
branch_labels = None
depends_on = None


def _has_table(table_name: str) -> bool:
    inspector = sa.inspect(op.get_bind())
    return inspector.has_table(table_name)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade():
    if not _has_table('user'):
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('email_verified_at', sa.DateTime(), nullable=True),
            *_timestamps(),
        )
    if not _has_table('about_page'):
        op.create_table(
            'about_page',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('section', sa.String(length=50), nullable=False, unique=True),
            sa.Column('title', sa.String(length=180), nullable=False),
            sa.Column('subtitle', sa.String(length=255), nullable=True),
            sa.Column('body', sa.Text(), nullable=False),
            sa.Column('image', sa.String(length=255), nullable=True),
            sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
            *_timestamps(),
        )
    if not _has_table('solution'):
        op.create_table(
            'solution',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('slug', sa.String(length=120), nullable=False, unique=True),
            sa.Column('title', sa.String(length=180), nullable=False),
            sa.Column('summary', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('icon', sa.String(length=50), nullable=True),
            sa.Column('features', sa.Text(), nullable=True),
            sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
        )
    if not _has_table('client'):
        op.create_table(
            'client',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=120), nullable=False, unique=True),
            sa.Column('industry', sa.String(length=80), nullable=True),
            sa.Column('logo', sa.String(length=255), nullable=True),
            sa.Column('website', sa.String(length=255), nullable=True),
            sa.Column('testimonial', sa.Text(), nullable=True),
            sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
            *_timestamps(),
        )
    if not _has_table('contact'):
        op.create_table(
            'contact',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('phone', sa.String(length=50), nullable=True),
            sa.Column('company', sa.String(length=120), nullable=True),
            sa.Column('subject', sa.String(length=180), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='new'),
            *_timestamps(),
            sa.UniqueConstraint('email', 'subject', name='uq_contact_email_subject'),
        )
    if not _has_table('insight'):
        op.create_table(
            'insight',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('slug', sa.String(length=180), nullable=False, unique=True),
            sa.Column('title', sa.String(length=180), nullable=False),
            sa.Column('category', sa.String(length=80), nullable=True),
            sa.Column('excerpt', sa.String(length=255), nullable=True),
            sa.Column('body', sa.Text(), nullable=False),
            sa.Column('author', sa.String(length=120), nullable=True),
            sa.Column('published_at', sa.DateTime(), nullable=True),
            sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
        )
    if not _has_table('project'):
        op.create_table(
            'project',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('slug', sa.String(length=180), nullable=False, unique=True),
            sa.Column('title', sa.String(length=180), nullable=False),
            sa.Column('client_name', sa.String(length=120), nullable=True),
            sa.Column('category', sa.String(length=80), nullable=True),
            sa.Column('summary', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('image', sa.String(length=255), nullable=True),
            sa.Column('completed_at', sa.Date(), nullable=True),
            sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
            *_timestamps(),
        )


def downgrade():
    for table_name in ('project', 'insight', 'contact', 'client', 'solution', 'about_page', 'user'):
        if _has_table(table_name):
            op.drop_table(table_name)
