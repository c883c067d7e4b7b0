import logging
from typing import List

from filmorate.api.friends.schemas import FriendStatus
from filmorate.api.users.schemas import User, UserCreate, UserUpdate
from filmorate.api.users.storage import UserStorage
from filmorate.core.exceptions import NotFoundError, DuplicatedDataError, ConditionsNotMetError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_storage: UserStorage):
        self.user_storage = user_storage

    def create(self, user: UserCreate) -> User:
        if self.user_storage.contains_email(user.email):
            raise DuplicatedDataError("Этот имейл уже используется")
        if user.name is None or not user.name.strip():
            user = user.model_copy(update={"name": user.login})
        created = self.user_storage.create(user)
        logger.info(f"User created: id={created.id}, login={created.login}")
        return created

    def find_by_id(self, user_id: int) -> User:
        return self._get_user(user_id)

    def find_all(self) -> List[User]:
        return self.user_storage.find_all()

    def update(self, user: UserUpdate) -> User:
        if user.id is None:
            raise ConditionsNotMetError("Id должен быть указан")
        self._get_user(user.id)
        if user.email is not None and self.user_storage.contains_email(user.email, exclude_id=user.id):
            raise DuplicatedDataError("Этот имейл уже используется")
        updated = self.user_storage.update(user)
        if updated is None:
            raise NotFoundError(f"Пользователь с id = {user.id} не найден")
        logger.info(f"User updated: id={updated.id}")
        return updated

    def remove_by_id(self, user_id: int) -> User:
        removed = self.user_storage.remove_by_id(user_id)
        if removed is None:
            raise NotFoundError(f"Пользователь с id = {user_id} не найден")
        logger.info(f"User removed: id={user_id}")
        return removed

    def add_friend(self, user_id: int, friend_id: int, status: str = FriendStatus.UNCONFIRMED.value) -> User:
        friend_status = self._parse_status(status)
        user, friend = self._get_pair(user_id, friend_id)
        result = self.user_storage.add_friend(user, friend, friend_status)
        logger.info(f"Friend {friend_id} added to user {user_id} with status {friend_status.value}")
        return result

    def remove_friend(self, user_id: int, friend_id: int) -> User:
        user, friend = self._get_pair(user_id, friend_id)
        result = self.user_storage.remove_friend(user, friend)
        logger.info(f"Friend {friend_id} removed from user {user_id}")
        return result

    def find_friends(self, user_id: int) -> List[User]:
        return self.user_storage.find_friends(self._get_user(user_id))

    def find_common_friends(self, user_id: int, other_id: int) -> List[User]:
        user = self._get_user(user_id)
        other_user = self._get_user(other_id)
        return self.user_storage.find_common_friends(user, other_user)

    def _get_user(self, user_id: int) -> User:
        user = self.user_storage.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"Пользователь с id = {user_id} не найден")
        return user

    def _get_pair(self, user_id: int, friend_id: int):
        if user_id == friend_id:
            raise ConditionsNotMetError("Нельзя добавить себя в друзья")
        return self._get_user(user_id), self._get_user(friend_id)

    @staticmethod
    def _parse_status(status: str) -> FriendStatus:
        try:
            return FriendStatus.parse(status)
        except ValueError:
            raise ConditionsNotMetError(f"Неизвестный статус дружбы: {status}")
