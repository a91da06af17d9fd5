"""Create users and summaries tables

Revision ID: 5c1e7a9b2d40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e7a9b2d40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, comment="ID"),
        sa.Column("username", sa.String(), nullable=False, comment="Username"),
        sa.Column(
            "password_hash", sa.String(), nullable=False, comment="Password hash"
        ),
        sa.Column(
            "display_name", sa.String(), nullable=False, comment="Display name"
        ),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("now()"),
            nullable=False,
            comment="Created at",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("id"),
    )
    op.create_index(
        op.f("ix_users_username"), "users", ["username"], unique=True
    )

    op.create_table(
        "summaries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, comment="ID"),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="Owner ID"),
        sa.Column("input_text", sa.Text(), nullable=False, comment="Input text"),
        sa.Column("summary", sa.Text(), nullable=False, comment="Summary"),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("now()"),
            nullable=False,
            comment="Created at",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("id"),
    )
    op.create_index(
        op.f("ix_summaries_user_id"), "summaries", ["user_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_summaries_user_id"), table_name="summaries")
    op.drop_table("summaries")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
