from typing import Dict

from filmorate.api.genres.schemas import Genre

GENRE_NAMES = (
    "Комедия",
    "Драма",
    "Мультфильм",
    "Триллер",
    "Документальный",
    "Боевик",
)


def default_genres() -> Dict[int, Genre]:
    """Предустановленные жанры, ID начинаются с 1 в порядке GENRE_NAMES."""
    return {
        genre_id: Genre(id=genre_id, name=name)
        for genre_id, name in enumerate(GENRE_NAMES, start=1)
    }
