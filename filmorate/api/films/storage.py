from abc import ABC, abstractmethod
from collections import Counter
from typing import List, Optional, Set

from sqlalchemy import select, insert, delete, func
from sqlalchemy.orm import Session

from filmorate.api.films import models
from filmorate.api.films.models import film_genres, likes
from filmorate.api.films.schemas import Film, FilmCreate, FilmUpdate, GenreRef
from filmorate.api.films.utils import update_film_fields
from filmorate.api.users.schemas import User
from filmorate.database.memory import MemoryStore
from filmorate.database.repository import BaseDbStorage


class FilmStorage(ABC):
    """
    Хранилище фильмов, лайков и жанров фильма.
    Ссылки на рейтинг и жанры должны быть проверены сервисом заранее.
    """

    @abstractmethod
    def create(self, film: FilmCreate) -> Film:
        ...

    @abstractmethod
    def find_by_id(self, film_id: int) -> Optional[Film]:
        ...

    @abstractmethod
    def find_all(self) -> List[Film]:
        ...

    @abstractmethod
    def update(self, film: FilmUpdate) -> Optional[Film]:
        """Переданный список жанров (даже пустой) полностью заменяет текущий."""

    @abstractmethod
    def remove_by_id(self, film_id: int) -> Optional[Film]:
        ...

    @abstractmethod
    def add_like(self, film: Film, user: User) -> Film:
        ...

    @abstractmethod
    def remove_like(self, film: Film, user: User) -> Film:
        ...

    @abstractmethod
    def find_popular(self, limit: int) -> List[Film]:
        """По убыванию числа лайков, при равенстве - по ID. Фильмы без лайков тоже попадают."""


class InMemoryFilmStorage(FilmStorage):
    def __init__(self, store: MemoryStore):
        self.store = store

    def create(self, film: FilmCreate) -> Film:
        new_film = Film(
            id=self.store.next_id(self.store.films),
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration
        )
        self.store.films[new_film.id] = new_film
        if film.mpa is not None:
            self.store.film_mpa[new_film.id] = film.mpa.id
        self._set_genres(new_film.id, film.genres or [])
        return self.find_by_id(new_film.id)

    def find_by_id(self, film_id: int) -> Optional[Film]:
        film = self.store.films.get(film_id)
        return self._materialize(film) if film else None

    def find_all(self) -> List[Film]:
        return [self._materialize(self.store.films[film_id]) for film_id in sorted(self.store.films)]

    def update(self, film: FilmUpdate) -> Optional[Film]:
        stored = self.store.films.get(film.id)
        if stored is None:
            return None
        update_film_fields(stored, film)
        if film.mpa is not None:
            self.store.film_mpa[film.id] = film.mpa.id
        if film.genres is not None:
            self._set_genres(film.id, film.genres)
        return self.find_by_id(film.id)

    def remove_by_id(self, film_id: int) -> Optional[Film]:
        removed = self.find_by_id(film_id)
        if removed is None:
            return None
        del self.store.films[film_id]
        self.store.film_mpa.pop(film_id, None)
        self.store.likes = {(f_id, user_id) for f_id, user_id in self.store.likes if f_id != film_id}
        self._set_genres(film_id, [])
        return removed

    def add_like(self, film: Film, user: User) -> Film:
        self.store.likes.add((film.id, user.id))
        return self.find_by_id(film.id)

    def remove_like(self, film: Film, user: User) -> Film:
        self.store.likes.discard((film.id, user.id))
        return self.find_by_id(film.id)

    def find_popular(self, limit: int) -> List[Film]:
        like_counts = Counter(film_id for film_id, _ in self.store.likes)
        ranked = sorted(self.store.films, key=lambda film_id: (-like_counts[film_id], film_id))
        return [self._materialize(self.store.films[film_id]) for film_id in ranked[:limit]]

    def _set_genres(self, film_id: int, genres: List[GenreRef]) -> None:
        self.store.film_genres = {
            (f_id, genre_id) for f_id, genre_id in self.store.film_genres if f_id != film_id
        }
        self.store.film_genres.update((film_id, genre.id) for genre in genres)

    def _materialize(self, film: Film) -> Film:
        materialized = film.model_copy(deep=True)
        mpa = self.store.mpa.get(self.store.film_mpa.get(film.id))
        materialized.mpa = mpa.model_copy() if mpa else None
        genre_ids = sorted(genre_id for f_id, genre_id in self.store.film_genres if f_id == film.id)
        materialized.genres = [
            self.store.genres[genre_id].model_copy()
            for genre_id in genre_ids
            if genre_id in self.store.genres
        ]
        materialized.likes = {user_id for f_id, user_id in self.store.likes if f_id == film.id}
        return materialized


class FilmDbStorage(BaseDbStorage, FilmStorage):
    def __init__(self, db: Session):
        super().__init__(db)

    def create(self, film: FilmCreate) -> Film:
        row = models.Film(
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
            mpa_id=film.mpa.id if film.mpa else None
        )
        # фильм и его жанры пишутся одной транзакцией
        with self.transaction():
            film_id = self._insert(row)
            self._insert_genres(film_id, film.genres or [])
        return self.find_by_id(film_id)

    def find_by_id(self, film_id: int) -> Optional[Film]:
        row = self.db.query(models.Film).filter(models.Film.id == film_id).first()
        return self._materialize(row) if row else None

    def find_all(self) -> List[Film]:
        rows = self.db.query(models.Film).order_by(models.Film.id).all()
        return [self._materialize(row) for row in rows]

    def update(self, film: FilmUpdate) -> Optional[Film]:
        stored = self.find_by_id(film.id)
        if stored is None:
            return None
        updated = update_film_fields(stored, film)
        values = {
            "name": updated.name,
            "description": updated.description,
            "release_date": updated.release_date,
            "duration": updated.duration,
        }
        if film.mpa is not None:
            values["mpa_id"] = film.mpa.id
        with self.transaction():
            self._update(self.db.query(models.Film).filter(models.Film.id == film.id), values)
            if film.genres is not None:
                self.db.execute(delete(film_genres).where(film_genres.c.film_id == film.id))
                self._insert_genres(film.id, film.genres)
        return self.find_by_id(film.id)

    def remove_by_id(self, film_id: int) -> Optional[Film]:
        removed = self.find_by_id(film_id)
        if removed is not None:
            # likes и film_genres чистятся каскадом по внешним ключам
            with self.transaction():
                self._delete(self.db.query(models.Film).filter(models.Film.id == film_id))
        return removed

    def add_like(self, film: Film, user: User) -> Film:
        with self.transaction():
            exists = self.db.execute(
                select(likes.c.film_id).where(likes.c.film_id == film.id, likes.c.user_id == user.id)
            ).first()
            if exists is None:
                self.db.execute(insert(likes).values(film_id=film.id, user_id=user.id))
        return self.find_by_id(film.id)

    def remove_like(self, film: Film, user: User) -> Film:
        with self.transaction():
            self.db.execute(
                delete(likes).where(likes.c.film_id == film.id, likes.c.user_id == user.id)
            )
        return self.find_by_id(film.id)

    def find_popular(self, limit: int) -> List[Film]:
        like_counts = (
            select(likes.c.film_id, func.count(likes.c.user_id).label("likes_count"))
            .group_by(likes.c.film_id)
            .subquery()
        )
        rows = (
            self.db.query(models.Film)
            .outerjoin(like_counts, like_counts.c.film_id == models.Film.id)
            .order_by(func.coalesce(like_counts.c.likes_count, 0).desc(), models.Film.id)
            .limit(limit)
            .all()
        )
        return [self._materialize(row) for row in rows]

    def _insert_genres(self, film_id: int, genres: List[GenreRef]) -> None:
        if genres:
            self.db.execute(
                insert(film_genres),
                [{"film_id": film_id, "genre_id": genre.id} for genre in genres]
            )

    def _likes(self, film_id: int) -> Set[int]:
        return set(self.db.scalars(select(likes.c.user_id).where(likes.c.film_id == film_id)))

    def _materialize(self, row: models.Film) -> Film:
        film = Film.model_validate(row)
        film.likes = self._likes(row.id)
        return film
