import logging

from sqlalchemy import text
from sqlalchemy.orm import Session

from filmorate.api.genres import models as genre_models
from filmorate.api.genres.utils import default_genres
from filmorate.api.mpa import models as mpa_models
from filmorate.api.mpa.utils import default_mpa

logger = logging.getLogger(__name__)


def seed_reference_data(db: Session) -> None:
    """
    Заполняет справочники жанров и рейтингов, если записей с нужными ID ещё нет.
    Повторный запуск ничего не меняет.
    """
    added = 0
    for genre in default_genres().values():
        if db.get(genre_models.Genre, genre.id) is None:
            db.add(genre_models.Genre(id=genre.id, name=genre.name))
            added += 1
    for mpa in default_mpa().values():
        if db.get(mpa_models.Mpa, mpa.id) is None:
            db.add(mpa_models.Mpa(id=mpa.id, name=mpa.name, description=mpa.description))
            added += 1
    db.commit()

    if db.get_bind().dialect.name == "postgresql":
        # ID вставлены явно, поэтому сдвигаем последовательности
        for table in ("genres", "mpa"):
            db.execute(text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT COALESCE(MAX(id), 1) FROM {table}))"
            ))
        db.commit()

    if added:
        logger.info(f"Reference data seeded: {added} rows")
