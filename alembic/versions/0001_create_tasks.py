"""create tasks table

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("store_key", sa.String(length=32), primary_key=True),
        sa.Column("custom_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date_created", sa.String(length=64), nullable=False),
    )
    op.create_index("ix_tasks_custom_id", "tasks", ["custom_id"])


def downgrade() -> None:
    op.drop_index("ix_tasks_custom_id", table_name="tasks")
    op.drop_table("tasks")
