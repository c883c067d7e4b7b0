from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session

from filmorate.api.genres import models
from filmorate.api.genres.schemas import Genre, GenreCreate, GenreUpdate
from filmorate.database.memory import MemoryStore
from filmorate.database.repository import BaseDbStorage


class GenreStorage(ABC):
    """Хранилище справочника жанров. Порядок выдачи - по ID."""

    @abstractmethod
    def create(self, genre: GenreCreate) -> Genre:
        ...

    @abstractmethod
    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        ...

    @abstractmethod
    def find_all(self) -> List[Genre]:
        ...

    @abstractmethod
    def update(self, genre: GenreUpdate) -> Optional[Genre]:
        ...

    @abstractmethod
    def remove_by_id(self, genre_id: int) -> Optional[Genre]:
        ...

    @abstractmethod
    def contains(self, genre) -> bool:
        """Есть ли жанр с ID переданного объекта."""

    @abstractmethod
    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        ...


class InMemoryGenreStorage(GenreStorage):
    def __init__(self, store: MemoryStore):
        self.store = store

    def create(self, genre: GenreCreate) -> Genre:
        new_genre = Genre(id=self.store.next_id(self.store.genres), name=genre.name)
        self.store.genres[new_genre.id] = new_genre
        return new_genre.model_copy()

    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        genre = self.store.genres.get(genre_id)
        return genre.model_copy() if genre else None

    def find_all(self) -> List[Genre]:
        return [self.store.genres[genre_id].model_copy() for genre_id in sorted(self.store.genres)]

    def update(self, genre: GenreUpdate) -> Optional[Genre]:
        stored = self.store.genres.get(genre.id)
        if stored is None:
            return None
        if genre.name and genre.name.strip():
            stored.name = genre.name
        return stored.model_copy()

    def remove_by_id(self, genre_id: int) -> Optional[Genre]:
        removed = self.store.genres.pop(genre_id, None)
        if removed is not None:
            self.store.film_genres = {
                (film_id, g_id) for film_id, g_id in self.store.film_genres if g_id != genre_id
            }
        return removed

    def contains(self, genre) -> bool:
        return genre.id in self.store.genres

    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            genre.name == name and genre.id != exclude_id
            for genre in self.store.genres.values()
        )


class GenreDbStorage(BaseDbStorage, GenreStorage):
    def __init__(self, db: Session):
        super().__init__(db)

    def create(self, genre: GenreCreate) -> Genre:
        row = models.Genre(name=genre.name)
        with self.transaction():
            genre_id = self._insert(row)
        return self.find_by_id(genre_id)

    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        row = self.db.query(models.Genre).filter(models.Genre.id == genre_id).first()
        return Genre.model_validate(row) if row else None

    def find_all(self) -> List[Genre]:
        rows = self.db.query(models.Genre).order_by(models.Genre.id).all()
        return [Genre.model_validate(row) for row in rows]

    def update(self, genre: GenreUpdate) -> Optional[Genre]:
        updated = self.find_by_id(genre.id)
        if updated is None:
            return None
        if genre.name and genre.name.strip():
            updated.name = genre.name
        with self.transaction():
            self._update(
                self.db.query(models.Genre).filter(models.Genre.id == updated.id),
                {"name": updated.name}
            )
        return updated

    def remove_by_id(self, genre_id: int) -> Optional[Genre]:
        removed = self.find_by_id(genre_id)
        if removed is not None:
            with self.transaction():
                self._delete(self.db.query(models.Genre).filter(models.Genre.id == genre_id))
        return removed

    def contains(self, genre) -> bool:
        return self.db.query(models.Genre.id).filter(models.Genre.id == genre.id).first() is not None

    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(models.Genre.id).filter(models.Genre.name == name)
        if exclude_id is not None:
            query = query.filter(models.Genre.id != exclude_id)
        return query.first() is not None
