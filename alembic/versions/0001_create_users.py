"""create users

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False, server_default=""),
        sa.Column("theme", sa.String(), nullable=False),
        sa.Column("language", sa.String(), nullable=False),
        sa.Column("timezone", sa.String(), nullable=False),
        sa.Column("entry_direction", sa.String(), nullable=False),
        sa.Column("entry_order", sa.String(), nullable=False),
        sa.Column("entries_per_page", sa.BigInteger(), nullable=False),
        sa.Column("keyboard_shortcuts", sa.Boolean(), nullable=False),
        sa.Column("show_reading_time", sa.Boolean(), nullable=False),
        sa.Column("stylesheet", sa.Text(), nullable=False),
        sa.Column("entry_swipe", sa.Boolean(), nullable=False),
        sa.Column("gesture_nav", sa.String(), nullable=False),
        sa.Column("display_mode", sa.String(), nullable=False),
        sa.Column("default_reading_speed", sa.BigInteger(), nullable=False),
        sa.Column("cjk_reading_speed", sa.BigInteger(), nullable=False),
        sa.Column("default_home_page", sa.String(), nullable=False),
        sa.Column("categories_sorting_order", sa.String(), nullable=False),
        sa.Column("mark_read_on_view", sa.Boolean(), nullable=False),
        sa.Column("media_playback_rate", sa.Float(), nullable=False),
        sa.Column("block_filter_entry_rules", sa.Text(), nullable=False),
        sa.Column("keep_filter_entry_rules", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
