from contextlib import contextmanager

from sqlalchemy.orm import Session, Query

from filmorate.core.exceptions import InternalServerError


class BaseDbStorage:
    """
    Общая часть хранилищ на основе БД.
    Ошибки самой БД пробрасываются как есть, а "тихие" сбои
    (ни одна строка не обновлена, не получен ID) превращаются в InternalServerError.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self):
        """Всё, что выполнено внутри блока, фиксируется одним коммитом."""
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _insert(self, row) -> int:
        self.db.add(row)
        self.db.flush()
        if row.id is None:
            raise InternalServerError("Не удалось сохранить данные")
        return row.id

    def _update(self, query: Query, values: dict) -> None:
        if query.update(values, synchronize_session=False) == 0:
            raise InternalServerError("Не удалось обновить данные")

    def _delete(self, query: Query) -> bool:
        return query.delete(synchronize_session=False) > 0
