"""create prayer_generations

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prayer_generations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("prayer_id", sa.String(64), nullable=False, index=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("situation", sa.Text(), nullable=True),
        sa.Column("tone", sa.String(16), nullable=True),
        sa.Column("length", sa.String(16), nullable=True),
        sa.Column("content_length", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("source", sa.String(16), nullable=False, index=True),
        sa.Column("generated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("prayer_generations")
