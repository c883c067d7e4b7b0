import logging
from typing import List

from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_genre_storage, verify_admin_key
from filmorate.api.genres.schemas import Genre, GenreCreate, GenreUpdate
from filmorate.api.genres.service import GenreService
from filmorate.api.genres.storage import GenreStorage

router = APIRouter(prefix="/genres", tags=["genres"])
logger = logging.getLogger(__name__)


def get_genre_service(genre_storage: GenreStorage = Depends(get_genre_storage)) -> GenreService:
    return GenreService(genre_storage)


@router.get("", response_model=List[Genre])
async def find_all(genre_service: GenreService = Depends(get_genre_service)):
    logger.debug("Find all genres")
    return genre_service.find_all()


@router.get("/{genre_id}", response_model=Genre)
async def find_by_id(genre_id: int, genre_service: GenreService = Depends(get_genre_service)):
    logger.debug(f"Find genre by id {genre_id}")
    return genre_service.find_by_id(genre_id)


@router.post(
    "",
    response_model=Genre,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(verify_admin_key)]
)
async def create(genre: GenreCreate, genre_service: GenreService = Depends(get_genre_service)):
    logger.debug(f"Create genre: {genre}")
    return genre_service.create(genre)


@router.put("", response_model=Genre, dependencies=[Depends(verify_admin_key)])
async def update(genre: GenreUpdate, genre_service: GenreService = Depends(get_genre_service)):
    logger.debug(f"Update genre: {genre}")
    return genre_service.update(genre)


@router.delete("/{genre_id}", response_model=Genre, dependencies=[Depends(verify_admin_key)])
async def remove_by_id(genre_id: int, genre_service: GenreService = Depends(get_genre_service)):
    logger.debug(f"Delete genre {genre_id}")
    return genre_service.remove_by_id(genre_id)
