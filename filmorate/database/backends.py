import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional

from alembic import command
from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from filmorate.api.films.storage import FilmStorage, InMemoryFilmStorage, FilmDbStorage
from filmorate.api.genres.storage import GenreStorage, InMemoryGenreStorage, GenreDbStorage
from filmorate.api.mpa.storage import MpaStorage, InMemoryMpaStorage, MpaDbStorage
from filmorate.api.users.storage import UserStorage, InMemoryUserStorage, UserDbStorage
from filmorate.database.database import Base, create_db_engine, create_session_factory
from filmorate.database.memory import MemoryStore
from filmorate.database.seed import seed_reference_data

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


class StorageBackend(ABC):
    """
    Источник хранилищ для всех сущностей.
    Выбирается один раз при создании приложения, а не на каждый запрос.
    """
    name: str

    @abstractmethod
    def sessions(self) -> Iterator[Optional[Session]]:
        """Сессия на время одного запроса (None, если БД не используется)."""

    @abstractmethod
    def user_storage(self, db: Optional[Session]) -> UserStorage:
        ...

    @abstractmethod
    def film_storage(self, db: Optional[Session]) -> FilmStorage:
        ...

    @abstractmethod
    def genre_storage(self, db: Optional[Session]) -> GenreStorage:
        ...

    @abstractmethod
    def mpa_storage(self, db: Optional[Session]) -> MpaStorage:
        ...

    def is_healthy(self) -> bool:
        return True


class MemoryBackend(StorageBackend):
    name = "memory"

    def __init__(self, store: Optional[MemoryStore] = None):
        self.store = store or MemoryStore()

    def sessions(self) -> Iterator[Optional[Session]]:
        yield None

    def user_storage(self, db: Optional[Session]) -> UserStorage:
        return InMemoryUserStorage(self.store)

    def film_storage(self, db: Optional[Session]) -> FilmStorage:
        return InMemoryFilmStorage(self.store)

    def genre_storage(self, db: Optional[Session]) -> GenreStorage:
        return InMemoryGenreStorage(self.store)

    def mpa_storage(self, db: Optional[Session]) -> MpaStorage:
        return InMemoryMpaStorage(self.store)


class DatabaseBackend(StorageBackend):
    name = "db"

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or create_db_engine()
        self.SessionLocal = create_session_factory(self.engine)
        self._create_schema()
        with self.SessionLocal() as db:
            seed_reference_data(db)

    def _create_schema(self) -> None:
        """
        Схемой постоянной БД владеют миграции alembic: при старте база доводится до head,
        поэтому последующий `alembic upgrade head` ничего не делает.
        База в памяти (тесты) создаётся прямо по моделям.
        """
        url = self.engine.url
        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            Base.metadata.create_all(bind=self.engine)
            return

        config = Config()
        config.set_main_option("script_location", str(MIGRATIONS_DIR))
        with self.engine.begin() as connection:
            config.attributes["connection"] = connection
            command.upgrade(config, "head")
        logger.info("Database schema is up to date")

    def sessions(self) -> Iterator[Optional[Session]]:
        """
        Создаёт сессию БД для каждого запроса.
        После использования - закрывает её.
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def user_storage(self, db: Optional[Session]) -> UserStorage:
        return UserDbStorage(db)

    def film_storage(self, db: Optional[Session]) -> FilmStorage:
        return FilmDbStorage(db)

    def genre_storage(self, db: Optional[Session]) -> GenreStorage:
        return GenreDbStorage(db)

    def mpa_storage(self, db: Optional[Session]) -> MpaStorage:
        return MpaDbStorage(db)

    def is_healthy(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database is unavailable: {str(e)}")
            return False


def create_backend(storage_type: str) -> StorageBackend:
    logger.info(f"Using storage backend: {storage_type}")
    if storage_type == MemoryBackend.name:
        return MemoryBackend()
    if storage_type == DatabaseBackend.name:
        return DatabaseBackend()
    raise ValueError(f"Неизвестный тип хранилища: {storage_type}")
