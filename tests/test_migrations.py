from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text

from filmorate.api.users.service import UserService
from filmorate.database.backends import DatabaseBackend, MIGRATIONS_DIR
from filmorate.database.database import create_db_engine
from factories import make_user


def alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def test_file_database_is_built_by_migrations(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'filmorate.db'}"
    engine = create_db_engine(database_url)
    DatabaseBackend(engine)

    head = ScriptDirectory.from_config(alembic_config(database_url)).get_current_head()
    with engine.connect() as connection:
        version = connection.execute(text("SELECT version_num FROM alembic_version")).scalar()
    assert version == head
    assert {"users", "friends", "films", "likes", "film_genres", "genres", "mpa"} <= set(
        inspect(engine).get_table_names()
    )
    engine.dispose()

    # ручной запуск миграций после старта приложения ничего не ломает
    command.upgrade(alembic_config(database_url), "head")


def test_restart_keeps_data_and_reference_rows(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'filmorate.db'}"
    first = DatabaseBackend(create_db_engine(database_url))
    with next(first.sessions()) as db:
        UserService(first.user_storage(db)).create(make_user(1))
    first.engine.dispose()

    second = DatabaseBackend(create_db_engine(database_url))
    with next(second.sessions()) as db:
        assert [user.login for user in second.user_storage(db).find_all()] == ["user1"]
        assert len(second.genre_storage(db).find_all()) == 6
        assert len(second.mpa_storage(db).find_all()) == 5
    second.engine.dispose()


def test_in_memory_database_skips_migrations():
    engine = create_db_engine("sqlite://")
    DatabaseBackend(engine)

    tables = set(inspect(engine).get_table_names())
    assert "alembic_version" not in tables
    assert "users" in tables
    engine.dispose()
