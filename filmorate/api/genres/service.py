import logging
from typing import List

from filmorate.api.genres.schemas import Genre, GenreCreate, GenreUpdate
from filmorate.api.genres.storage import GenreStorage
from filmorate.core.exceptions import NotFoundError, DuplicatedDataError, ConditionsNotMetError

logger = logging.getLogger(__name__)


class GenreService:
    def __init__(self, genre_storage: GenreStorage):
        self.genre_storage = genre_storage

    def create(self, genre: GenreCreate) -> Genre:
        if self.genre_storage.contains_name(genre.name):
            raise DuplicatedDataError("Такой жанр уже существует")
        created = self.genre_storage.create(genre)
        logger.info(f"Genre created: id={created.id}, name={created.name}")
        return created

    def find_by_id(self, genre_id: int) -> Genre:
        genre = self.genre_storage.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError(f"Жанр с id = {genre_id} не найден")
        return genre

    def find_all(self) -> List[Genre]:
        return self.genre_storage.find_all()

    def update(self, genre: GenreUpdate) -> Genre:
        if genre.id is None:
            raise ConditionsNotMetError("Id должен быть указан")
        self.find_by_id(genre.id)
        if genre.name and self.genre_storage.contains_name(genre.name, exclude_id=genre.id):
            raise DuplicatedDataError("Такой жанр уже существует")
        updated = self.genre_storage.update(genre)
        if updated is None:
            raise NotFoundError(f"Жанр с id = {genre.id} не найден")
        logger.info(f"Genre updated: id={updated.id}")
        return updated

    def remove_by_id(self, genre_id: int) -> Genre:
        removed = self.genre_storage.remove_by_id(genre_id)
        if removed is None:
            raise NotFoundError(f"Жанр с id = {genre_id} не найден")
        logger.info(f"Genre removed: id={genre_id}")
        return removed
