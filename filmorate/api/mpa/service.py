import logging
from typing import List

from filmorate.api.mpa.schemas import Mpa, MpaCreate, MpaUpdate
from filmorate.api.mpa.storage import MpaStorage
from filmorate.core.exceptions import NotFoundError, DuplicatedDataError, ConditionsNotMetError

logger = logging.getLogger(__name__)


class MpaService:
    def __init__(self, mpa_storage: MpaStorage):
        self.mpa_storage = mpa_storage

    def create(self, mpa: MpaCreate) -> Mpa:
        if self.mpa_storage.contains_name(mpa.name):
            raise DuplicatedDataError("Такой рейтинг уже существует")
        created = self.mpa_storage.create(mpa)
        logger.info(f"Mpa created: id={created.id}, name={created.name}")
        return created

    def find_by_id(self, mpa_id: int) -> Mpa:
        mpa = self.mpa_storage.find_by_id(mpa_id)
        if mpa is None:
            raise NotFoundError(f"Рейтинг с id = {mpa_id} не найден")
        return mpa

    def find_all(self) -> List[Mpa]:
        return self.mpa_storage.find_all()

    def update(self, mpa: MpaUpdate) -> Mpa:
        if mpa.id is None:
            raise ConditionsNotMetError("Id должен быть указан")
        self.find_by_id(mpa.id)
        if mpa.name and self.mpa_storage.contains_name(mpa.name, exclude_id=mpa.id):
            raise DuplicatedDataError("Такой рейтинг уже существует")
        updated = self.mpa_storage.update(mpa)
        if updated is None:
            raise NotFoundError(f"Рейтинг с id = {mpa.id} не найден")
        logger.info(f"Mpa updated: id={updated.id}")
        return updated

    def remove_by_id(self, mpa_id: int) -> Mpa:
        removed = self.mpa_storage.remove_by_id(mpa_id)
        if removed is None:
            raise NotFoundError(f"Рейтинг с id = {mpa_id} не найден")
        logger.info(f"Mpa removed: id={mpa_id}")
        return removed
