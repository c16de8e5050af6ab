"""create prayer_feedback, prayer_learning_data

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prayer_feedback",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("prayer_id", sa.String(64), nullable=False, index=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("feedback_text", sa.Text(), nullable=False, server_default=""),
        sa.Column("improvements", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("user_id", sa.String(36), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "prayer_learning_data",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("pattern_text", sa.String(255), nullable=False),
        sa.Column("pattern_type", sa.String(32), nullable=False, server_default="avoid_pattern"),
        sa.Column("effectiveness_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("last_updated", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_prayer_learning_data_pattern_text", "prayer_learning_data", ["pattern_text"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_prayer_learning_data_pattern_text", table_name="prayer_learning_data")
    op.drop_table("prayer_learning_data")
    op.drop_table("prayer_feedback")
