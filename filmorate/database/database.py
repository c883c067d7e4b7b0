from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from filmorate.core.config import settings

Base = declarative_base()


def create_db_engine(database_url: str = None) -> Engine:
    """
    Создаёт движок БД.
    Для SQLite включает проверку внешних ключей (нужна для каскадного удаления).
    """
    database_url = database_url or settings.DATABASE_URL
    if not database_url:
        raise ValueError("❌ DATABASE_URL не найден в .env файле!")

    options = {"pool_pre_ping": True, "echo": settings.DEBUG, "future": True}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            # одна общая память на все сессии
            options["poolclass"] = StaticPool

    engine = create_engine(database_url, **options)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )
