import pytest
from fastapi.testclient import TestClient

from filmorate.api.films.service import FilmService
from filmorate.api.genres.service import GenreService
from filmorate.api.mpa.service import MpaService
from filmorate.api.users.service import UserService
from filmorate.core.config import settings
from filmorate.database.backends import MemoryBackend, DatabaseBackend
from filmorate.database.database import create_db_engine
from filmorate.main import create_app


@pytest.fixture(params=["memory", "db"])
def backend(request):
    """Каждый тест слоя хранения прогоняется на обоих хранилищах"""
    if request.param == "memory":
        yield MemoryBackend()
    else:
        db_backend = DatabaseBackend(create_db_engine("sqlite://"))
        yield db_backend
        db_backend.engine.dispose()


@pytest.fixture
def db(backend):
    sessions = backend.sessions()
    session = next(sessions)
    yield session
    sessions.close()


@pytest.fixture
def user_service(backend, db):
    return UserService(backend.user_storage(db))


@pytest.fixture
def film_service(backend, db):
    return FilmService(
        backend.film_storage(db),
        backend.user_storage(db),
        backend.mpa_storage(db),
        backend.genre_storage(db)
    )


@pytest.fixture
def genre_service(backend, db):
    return GenreService(backend.genre_storage(db))


@pytest.fixture
def mpa_service(backend, db):
    return MpaService(backend.mpa_storage(db))


@pytest.fixture
def client():
    """HTTP-клиент поверх приложения с хранилищем в памяти"""
    with TestClient(create_app(MemoryBackend())) as test_client:
        yield test_client


@pytest.fixture
def db_client():
    backend = DatabaseBackend(create_db_engine("sqlite://"))
    with TestClient(create_app(backend)) as test_client:
        yield test_client
    backend.engine.dispose()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Key": settings.ADMIN_KEY}
