import logging
from typing import List

from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_film_storage, get_user_storage, get_mpa_storage, get_genre_storage
from filmorate.api.films.schemas import Film, FilmCreate, FilmUpdate
from filmorate.api.films.service import FilmService
from filmorate.api.films.storage import FilmStorage
from filmorate.api.genres.storage import GenreStorage
from filmorate.api.mpa.storage import MpaStorage
from filmorate.api.users.storage import UserStorage
from filmorate.core.config import settings

router = APIRouter(prefix="/films", tags=["films"])
logger = logging.getLogger(__name__)


def get_film_service(
        film_storage: FilmStorage = Depends(get_film_storage),
        user_storage: UserStorage = Depends(get_user_storage),
        mpa_storage: MpaStorage = Depends(get_mpa_storage),
        genre_storage: GenreStorage = Depends(get_genre_storage)
) -> FilmService:
    return FilmService(film_storage, user_storage, mpa_storage, genre_storage)


@router.get("", response_model=List[Film])
async def find_all(film_service: FilmService = Depends(get_film_service)):
    logger.debug("Find all films")
    return film_service.find_all()


@router.get("/popular", response_model=List[Film])
async def find_popular(
        count: int = settings.POPULAR_FILMS_COUNT,
        film_service: FilmService = Depends(get_film_service)
):
    logger.debug(f"Find popular {count} films")
    return film_service.find_popular(count)


@router.get("/{film_id}", response_model=Film)
async def find_by_id(film_id: int, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Find film by id {film_id}")
    return film_service.find_by_id(film_id)


@router.post("", response_model=Film, status_code=status.HTTP_201_CREATED)
async def create(film: FilmCreate, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Create film: {film}")
    return film_service.create(film)


@router.put("", response_model=Film)
async def update(film: FilmUpdate, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Update film: {film}")
    return film_service.update(film)


@router.delete("/{film_id}", response_model=Film)
async def remove_by_id(film_id: int, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Delete film {film_id}")
    return film_service.remove_by_id(film_id)


@router.put("/{film_id}/like/{user_id}", response_model=Film)
async def add_like(film_id: int, user_id: int, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Like film: {film_id} by user: {user_id}")
    return film_service.add_like(film_id, user_id)


@router.delete("/{film_id}/like/{user_id}", response_model=Film)
async def remove_like(film_id: int, user_id: int, film_service: FilmService = Depends(get_film_service)):
    logger.debug(f"Delete like film: {film_id} by user: {user_id}")
    return film_service.remove_like(film_id, user_id)
