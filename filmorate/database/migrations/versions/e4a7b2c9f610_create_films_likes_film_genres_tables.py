"""create films, likes and film_genres tables

Revision ID: e4a7b2c9f610
Revises: 8c3f9a6e1d27
Create Date: 2026-10-19 12:19:37.004182

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = 'e4a7b2c9f610'
down_revision: Union[str, Sequence[str], None] = '8c3f9a6e1d27'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "films",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(200)),
        sa.Column("release_date", sa.Date, nullable=False),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("mpa_id", sa.Integer, sa.ForeignKey("mpa.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_table(
        "film_genres",
        sa.Column("film_id", sa.Integer, sa.ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("genre_id", sa.Integer, sa.ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_table(
        "likes",
        sa.Column("film_id", sa.Integer, sa.ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("idx_likes_user", "likes", ["user_id"])


def downgrade() -> None:
    op.drop_table("likes")
    op.drop_table("film_genres")
    op.drop_table("films")
