import logging

from filmorate.api.films.schemas import Film, FilmUpdate

logger = logging.getLogger(__name__)

FILM_FIELDS = ("name", "description", "release_date", "duration")


def update_film_fields(old_film: Film, new_film: FilmUpdate) -> Film:
    """
    Переносит в old_film все непустые (не None) простые поля new_film.
    Рейтинг и жанры - отдельные связи, их меняет хранилище.
    """
    for field in FILM_FIELDS:
        value = getattr(new_film, field)
        if value is not None:
            logger.info(f"Updating film {old_film.id} with {field}: {value}")
            setattr(old_film, field, value)
    return old_film
