"""create genres and mpa tables

Revision ID: 5b1e0c7d2a41
Revises: 
Create Date: 2026-10-19 12:10:42.118320

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '5b1e0c7d2a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GENRES = ["Комедия", "Драма", "Мультфильм", "Триллер", "Документальный", "Боевик"]

MPA = [
    ("G", "у фильма нет возрастных ограничений"),
    ("PG", "детям рекомендуется смотреть фильм с родителями"),
    ("PG-13", "детям до 13 лет просмотр не желателен"),
    ("R", "лицам до 17 лет просматривать фильм можно только в присутствии взрослого"),
    ("NC-17", "лицам до 18 лет просмотр запрещён"),
]


def upgrade() -> None:
    genres = op.create_table(
        "genres",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )
    mpa = op.create_table(
        "mpa",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String(20), nullable=False, unique=True),
        sa.Column("description", sa.String(255)),
    )
    # ID справочников фиксированы, на них ссылаются клиенты
    op.bulk_insert(genres, [{"id": i, "name": name} for i, name in enumerate(GENRES, start=1)])
    op.bulk_insert(
        mpa,
        [{"id": i, "name": name, "description": desc} for i, (name, desc) in enumerate(MPA, start=1)]
    )
    if op.get_bind().dialect.name == "postgresql":
        op.execute("SELECT setval(pg_get_serial_sequence('genres', 'id'), (SELECT MAX(id) FROM genres))")
        op.execute("SELECT setval(pg_get_serial_sequence('mpa', 'id'), (SELECT MAX(id) FROM mpa))")


def downgrade() -> None:
    op.drop_table("mpa")
    op.drop_table("genres")
