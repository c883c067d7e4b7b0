import logging
from typing import List, Union

from filmorate.api.films.schemas import Film, FilmCreate, FilmUpdate
from filmorate.api.films.storage import FilmStorage
from filmorate.api.genres.storage import GenreStorage
from filmorate.api.mpa.storage import MpaStorage
from filmorate.api.users.schemas import User
from filmorate.api.users.storage import UserStorage
from filmorate.core.exceptions import NotFoundError, ConditionsNotMetError

logger = logging.getLogger(__name__)


class FilmService:
    def __init__(
            self,
            film_storage: FilmStorage,
            user_storage: UserStorage,
            mpa_storage: MpaStorage,
            genre_storage: GenreStorage
    ):
        self.film_storage = film_storage
        self.user_storage = user_storage
        self.mpa_storage = mpa_storage
        self.genre_storage = genre_storage

    def create(self, film: FilmCreate) -> Film:
        self._check_mpa_and_genres(film)
        created = self.film_storage.create(film)
        logger.info(f"Film created: id={created.id}, name={created.name}")
        return created

    def find_by_id(self, film_id: int) -> Film:
        return self._get_film(film_id)

    def find_all(self) -> List[Film]:
        return self.film_storage.find_all()

    def update(self, film: FilmUpdate) -> Film:
        if film.id is None:
            raise ConditionsNotMetError("Id должен быть указан")
        self._get_film(film.id)
        self._check_mpa_and_genres(film)
        updated = self.film_storage.update(film)
        if updated is None:
            raise NotFoundError(f"Фильм с id = {film.id} не найден")
        logger.info(f"Film updated: id={updated.id}")
        return updated

    def remove_by_id(self, film_id: int) -> Film:
        removed = self.film_storage.remove_by_id(film_id)
        if removed is None:
            raise NotFoundError(f"Фильм с id = {film_id} не найден")
        logger.info(f"Film removed: id={film_id}")
        return removed

    def add_like(self, film_id: int, user_id: int) -> Film:
        film = self._get_film(film_id)
        result = self.film_storage.add_like(film, self._get_user(user_id))
        logger.info(f"User {user_id} liked film {film_id}")
        return result

    def remove_like(self, film_id: int, user_id: int) -> Film:
        film = self._get_film(film_id)
        result = self.film_storage.remove_like(film, self._get_user(user_id))
        logger.info(f"User {user_id} removed like from film {film_id}")
        return result

    def find_popular(self, count: int) -> List[Film]:
        if count <= 0:
            raise ConditionsNotMetError("Количество фильмов должно быть положительным")
        return self.film_storage.find_popular(count)

    def _get_film(self, film_id: int) -> Film:
        film = self.film_storage.find_by_id(film_id)
        if film is None:
            raise NotFoundError(f"Фильм с id = {film_id} не найден")
        return film

    def _get_user(self, user_id: int) -> User:
        user = self.user_storage.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"Пользователь с id = {user_id} не найден")
        return user

    def _check_mpa_and_genres(self, film: Union[FilmCreate, FilmUpdate]) -> None:
        if film.mpa is not None and not self.mpa_storage.contains(film.mpa):
            raise NotFoundError(f"Mpa не найден, указанный id = {film.mpa.id}")
        for genre in film.genres or []:
            if not self.genre_storage.contains(genre):
                raise NotFoundError(f"Genre не найден, указанный id = {genre.id}")
