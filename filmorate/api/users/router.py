import logging
from typing import List

from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_user_storage
from filmorate.api.users.schemas import User, UserCreate, UserUpdate
from filmorate.api.users.service import UserService
from filmorate.api.users.storage import UserStorage

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def get_user_service(user_storage: UserStorage = Depends(get_user_storage)) -> UserService:
    return UserService(user_storage)


@router.get("", response_model=List[User])
async def find_all(user_service: UserService = Depends(get_user_service)):
    logger.debug("Find all users")
    return user_service.find_all()


@router.get("/{user_id}", response_model=User)
async def find_by_id(user_id: int, user_service: UserService = Depends(get_user_service)):
    logger.debug(f"Find user by id {user_id}")
    return user_service.find_by_id(user_id)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create(user: UserCreate, user_service: UserService = Depends(get_user_service)):
    logger.debug(f"Create user: {user}")
    return user_service.create(user)


@router.put("", response_model=User)
async def update(user: UserUpdate, user_service: UserService = Depends(get_user_service)):
    logger.debug(f"Update user: {user}")
    return user_service.update(user)


@router.delete("/{user_id}", response_model=User)
async def remove_by_id(user_id: int, user_service: UserService = Depends(get_user_service)):
    logger.debug(f"Delete user {user_id}")
    return user_service.remove_by_id(user_id)
