from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from filmorate.api.films.storage import FilmStorage
from filmorate.api.genres.storage import GenreStorage
from filmorate.api.mpa.storage import MpaStorage
from filmorate.api.users.storage import UserStorage
from filmorate.core.config import settings
from filmorate.core.exceptions import ForbiddenError
from filmorate.database.backends import StorageBackend


def get_backend(request: Request) -> StorageBackend:
    return request.app.state.backend


def get_db(backend: StorageBackend = Depends(get_backend)):
    yield from backend.sessions()


def get_user_storage(
        backend: StorageBackend = Depends(get_backend),
        db: Optional[Session] = Depends(get_db)
) -> UserStorage:
    return backend.user_storage(db)


def get_film_storage(
        backend: StorageBackend = Depends(get_backend),
        db: Optional[Session] = Depends(get_db)
) -> FilmStorage:
    return backend.film_storage(db)


def get_genre_storage(
        backend: StorageBackend = Depends(get_backend),
        db: Optional[Session] = Depends(get_db)
) -> GenreStorage:
    return backend.genre_storage(db)


def get_mpa_storage(
        backend: StorageBackend = Depends(get_backend),
        db: Optional[Session] = Depends(get_db)
) -> MpaStorage:
    return backend.mpa_storage(db)


async def verify_admin_key(x_admin_key: Optional[str] = Header(None)) -> None:
    """Изменять справочники можно только с секретным ключом администратора"""
    if x_admin_key != settings.ADMIN_KEY:
        raise ForbiddenError("Неверный ключ администратора")
