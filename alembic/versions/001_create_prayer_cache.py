"""create prayer_cache

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prayer_cache",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("cache_key", sa.String(64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("generated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_prayer_cache_cache_key", "prayer_cache", ["cache_key"], unique=True)
    op.create_index("ix_prayer_cache_expires_at", "prayer_cache", ["expires_at"])


def downgrade() -> None:
    op.drop_index("ix_prayer_cache_expires_at", table_name="prayer_cache")
    op.drop_index("ix_prayer_cache_cache_key", table_name="prayer_cache")
    op.drop_table("prayer_cache")
