"""create users and friends tables

Revision ID: 8c3f9a6e1d27
Revises: 5b1e0c7d2a41
Create Date: 2026-10-19 12:14:03.560915

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '8c3f9a6e1d27'
down_revision: Union[str, Sequence[str], None] = '5b1e0c7d2a41'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("login", sa.String(50), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("birthday", sa.Date, nullable=False),
    )
    op.create_table(
        "friends",
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("friend_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="UNCONFIRMED"),
        sa.CheckConstraint("user_id <> friend_id", name="ck_friends_not_self"),
    )


def downgrade() -> None:
    op.drop_table("friends")
    op.drop_table("users")
