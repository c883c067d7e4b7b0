import logging
from typing import List

from fastapi import APIRouter, Depends

from filmorate.api.friends.schemas import FriendStatus
from filmorate.api.users.router import get_user_service
from filmorate.api.users.schemas import User
from filmorate.api.users.service import UserService

router = APIRouter(prefix="/users/{user_id}/friends", tags=["friends"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[User])
async def find_friends(user_id: int, user_service: UserService = Depends(get_user_service)):
    logger.debug(f"Find friends {user_id}")
    return user_service.find_friends(user_id)


@router.get("/common/{other_id}", response_model=List[User])
async def find_common_friends(
        user_id: int,
        other_id: int,
        user_service: UserService = Depends(get_user_service)
):
    logger.debug(f"Find common friends id = {user_id} with otherId = {other_id}")
    return user_service.find_common_friends(user_id, other_id)


@router.put("/{friend_id}", response_model=User)
async def add_friend(
        user_id: int,
        friend_id: int,
        status: str = FriendStatus.UNCONFIRMED.value,
        user_service: UserService = Depends(get_user_service)
):
    logger.debug(f"Add friend {friend_id} to user: {user_id}, status {status}")
    return user_service.add_friend(user_id, friend_id, status)


@router.delete("/{friend_id}", response_model=User)
async def remove_friend(
        user_id: int,
        friend_id: int,
        user_service: UserService = Depends(get_user_service)
):
    logger.debug(f"Delete friend {friend_id} from user: {user_id}")
    return user_service.remove_friend(user_id, friend_id)
