from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.orm import Session

from filmorate.api.mpa import models
from filmorate.api.mpa.schemas import Mpa, MpaCreate, MpaUpdate
from filmorate.database.memory import MemoryStore
from filmorate.database.repository import BaseDbStorage


def _merge(stored: Mpa, mpa: MpaUpdate) -> Mpa:
    if mpa.name and mpa.name.strip():
        stored.name = mpa.name
    if mpa.description and mpa.description.strip():
        stored.description = mpa.description
    return stored


class MpaStorage(ABC):
    """Хранилище справочника рейтингов MPA. Порядок выдачи - по ID."""

    @abstractmethod
    def create(self, mpa: MpaCreate) -> Mpa:
        ...

    @abstractmethod
    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        ...

    @abstractmethod
    def find_all(self) -> List[Mpa]:
        ...

    @abstractmethod
    def update(self, mpa: MpaUpdate) -> Optional[Mpa]:
        ...

    @abstractmethod
    def remove_by_id(self, mpa_id: int) -> Optional[Mpa]:
        ...

    @abstractmethod
    def contains(self, mpa) -> bool:
        ...

    @abstractmethod
    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        ...


class InMemoryMpaStorage(MpaStorage):
    def __init__(self, store: MemoryStore):
        self.store = store

    def create(self, mpa: MpaCreate) -> Mpa:
        new_mpa = Mpa(id=self.store.next_id(self.store.mpa), name=mpa.name, description=mpa.description)
        self.store.mpa[new_mpa.id] = new_mpa
        return new_mpa.model_copy()

    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        mpa = self.store.mpa.get(mpa_id)
        return mpa.model_copy() if mpa else None

    def find_all(self) -> List[Mpa]:
        return [self.store.mpa[mpa_id].model_copy() for mpa_id in sorted(self.store.mpa)]

    def update(self, mpa: MpaUpdate) -> Optional[Mpa]:
        stored = self.store.mpa.get(mpa.id)
        if stored is None:
            return None
        return _merge(stored, mpa).model_copy()

    def remove_by_id(self, mpa_id: int) -> Optional[Mpa]:
        removed = self.store.mpa.pop(mpa_id, None)
        if removed is not None:
            # у фильмов рейтинг просто сбрасывается
            self.store.film_mpa = {
                film_id: m_id for film_id, m_id in self.store.film_mpa.items() if m_id != mpa_id
            }
        return removed

    def contains(self, mpa) -> bool:
        return mpa.id in self.store.mpa

    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            mpa.name == name and mpa.id != exclude_id
            for mpa in self.store.mpa.values()
        )


class MpaDbStorage(BaseDbStorage, MpaStorage):
    def __init__(self, db: Session):
        super().__init__(db)

    def create(self, mpa: MpaCreate) -> Mpa:
        row = models.Mpa(name=mpa.name, description=mpa.description)
        with self.transaction():
            mpa_id = self._insert(row)
        return self.find_by_id(mpa_id)

    def find_by_id(self, mpa_id: int) -> Optional[Mpa]:
        row = self.db.query(models.Mpa).filter(models.Mpa.id == mpa_id).first()
        return Mpa.model_validate(row) if row else None

    def find_all(self) -> List[Mpa]:
        rows = self.db.query(models.Mpa).order_by(models.Mpa.id).all()
        return [Mpa.model_validate(row) for row in rows]

    def update(self, mpa: MpaUpdate) -> Optional[Mpa]:
        stored = self.find_by_id(mpa.id)
        if stored is None:
            return None
        updated = _merge(stored, mpa)
        with self.transaction():
            self._update(
                self.db.query(models.Mpa).filter(models.Mpa.id == updated.id),
                {"name": updated.name, "description": updated.description}
            )
        return updated

    def remove_by_id(self, mpa_id: int) -> Optional[Mpa]:
        removed = self.find_by_id(mpa_id)
        if removed is not None:
            with self.transaction():
                self._delete(self.db.query(models.Mpa).filter(models.Mpa.id == mpa_id))
        return removed

    def contains(self, mpa) -> bool:
        return self.db.query(models.Mpa.id).filter(models.Mpa.id == mpa.id).first() is not None

    def contains_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(models.Mpa.id).filter(models.Mpa.name == name)
        if exclude_id is not None:
            query = query.filter(models.Mpa.id != exclude_id)
        return query.first() is not None
