"""Create pages table.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

from alembic import op


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE pages (
            id          UUID PRIMARY KEY,
            title       TEXT NOT NULL DEFAULT 'Untitled',
            layout      JSONB NOT NULL DEFAULT '[]'::jsonb,
            status      TEXT NOT NULL DEFAULT 'draft',
            created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),

            CONSTRAINT layout_is_array CHECK (jsonb_typeof(layout) = 'array')
        );
    """)

    # Page picker lists newest first
    op.execute("""
        CREATE INDEX idx_pages_created_at ON pages (created_at DESC);
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS pages;")
