from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, aliased

from filmorate.api.friends.models import Friendship
from filmorate.api.friends.schemas import FriendStatus
from filmorate.api.users import models
from filmorate.api.users.schemas import User, UserCreate, UserUpdate
from filmorate.api.users.utils import update_user_fields
from filmorate.database.memory import MemoryStore
from filmorate.database.repository import BaseDbStorage


class UserStorage(ABC):
    """
    Хранилище пользователей и направленных связей дружбы.
    Возвращаемые пользователи всегда содержат актуальную карту друзей.
    Проверки существования и уникальности делает сервис, до вызова хранилища.
    """

    @abstractmethod
    def create(self, user: UserCreate) -> User:
        ...

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def find_all(self) -> List[User]:
        ...

    @abstractmethod
    def update(self, user: UserUpdate) -> Optional[User]:
        ...

    @abstractmethod
    def remove_by_id(self, user_id: int) -> Optional[User]:
        """Удаляет пользователя вместе с его дружбой и лайками, возвращает снимок до удаления."""

    @abstractmethod
    def contains_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        ...

    @abstractmethod
    def add_friend(self, user: User, friend: User, status: FriendStatus) -> User:
        """
        Добавляет связь user -> friend.
        CONFIRMED ставит и обратную связь friend -> user.
        Уже подтверждённая связь не понижается до UNCONFIRMED.
        """

    @abstractmethod
    def remove_friend(self, user: User, friend: User) -> User:
        """
        Удаляет только связь user -> friend.
        Подтверждённая обратная связь становится UNCONFIRMED.
        """

    @abstractmethod
    def find_friends(self, user: User) -> List[User]:
        ...

    @abstractmethod
    def find_common_friends(self, user: User, other_user: User) -> List[User]:
        ...


class InMemoryUserStorage(UserStorage):
    def __init__(self, store: MemoryStore):
        self.store = store

    def create(self, user: UserCreate) -> User:
        new_user = User(
            id=self.store.next_id(self.store.users),
            email=user.email,
            login=user.login,
            name=user.name,
            birthday=user.birthday
        )
        self.store.users[new_user.id] = new_user
        return self._with_friends(new_user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        user = self.store.users.get(user_id)
        return self._with_friends(user) if user else None

    def find_all(self) -> List[User]:
        return [self._with_friends(self.store.users[user_id]) for user_id in sorted(self.store.users)]

    def update(self, user: UserUpdate) -> Optional[User]:
        stored = self.store.users.get(user.id)
        if stored is None:
            return None
        update_user_fields(stored, user)
        return self._with_friends(stored)

    def remove_by_id(self, user_id: int) -> Optional[User]:
        removed = self.find_by_id(user_id)
        if removed is None:
            return None
        del self.store.users[user_id]
        self.store.friendships = {
            edge: status for edge, status in self.store.friendships.items() if user_id not in edge
        }
        self.store.likes = {(film_id, u_id) for film_id, u_id in self.store.likes if u_id != user_id}
        return removed

    def contains_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            user.email == email and user.id != exclude_id
            for user in self.store.users.values()
        )

    def add_friend(self, user: User, friend: User, status: FriendStatus) -> User:
        self._put_edge(user.id, friend.id, status)
        if status == FriendStatus.CONFIRMED:
            self._put_edge(friend.id, user.id, FriendStatus.CONFIRMED)
        return self.find_by_id(user.id)

    def remove_friend(self, user: User, friend: User) -> User:
        self.store.friendships.pop((user.id, friend.id), None)
        if self.store.friendships.get((friend.id, user.id)) == FriendStatus.CONFIRMED:
            self.store.friendships[(friend.id, user.id)] = FriendStatus.UNCONFIRMED
        return self.find_by_id(user.id)

    def find_friends(self, user: User) -> List[User]:
        return self._find_many(self._friend_ids(user.id))

    def find_common_friends(self, user: User, other_user: User) -> List[User]:
        common = self._friend_ids(user.id) & self._friend_ids(other_user.id)
        return self._find_many(common)

    def _put_edge(self, user_id: int, friend_id: int, status: FriendStatus) -> None:
        if self.store.friendships.get((user_id, friend_id)) != FriendStatus.CONFIRMED:
            self.store.friendships[(user_id, friend_id)] = status

    def _friend_ids(self, user_id: int) -> set:
        return {friend_id for owner_id, friend_id in self.store.friendships if owner_id == user_id}

    def _find_many(self, user_ids) -> List[User]:
        return [
            self._with_friends(self.store.users[user_id])
            for user_id in sorted(user_ids)
            if user_id in self.store.users
        ]

    def _with_friends(self, user: User) -> User:
        materialized = user.model_copy(deep=True)
        materialized.friends = {
            friend_id: status
            for (owner_id, friend_id), status in self.store.friendships.items()
            if owner_id == user.id
        }
        return materialized


class UserDbStorage(BaseDbStorage, UserStorage):
    def __init__(self, db: Session):
        super().__init__(db)

    def create(self, user: UserCreate) -> User:
        row = models.User(
            email=user.email,
            login=user.login,
            name=user.name,
            birthday=user.birthday
        )
        with self.transaction():
            user_id = self._insert(row)
        return self.find_by_id(user_id)

    def find_by_id(self, user_id: int) -> Optional[User]:
        row = self.db.query(models.User).filter(models.User.id == user_id).first()
        return self._with_friends(row) if row else None

    def find_all(self) -> List[User]:
        rows = self.db.query(models.User).order_by(models.User.id).all()
        return [self._with_friends(row) for row in rows]

    def update(self, user: UserUpdate) -> Optional[User]:
        stored = self.find_by_id(user.id)
        if stored is None:
            return None
        updated = update_user_fields(stored, user)
        with self.transaction():
            self._update(
                self.db.query(models.User).filter(models.User.id == updated.id),
                {
                    "email": updated.email,
                    "login": updated.login,
                    "name": updated.name,
                    "birthday": updated.birthday,
                }
            )
        return updated

    def remove_by_id(self, user_id: int) -> Optional[User]:
        removed = self.find_by_id(user_id)
        if removed is not None:
            # friends и likes чистятся каскадом по внешним ключам
            with self.transaction():
                self._delete(self.db.query(models.User).filter(models.User.id == user_id))
        return removed

    def contains_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(models.User.id).filter(models.User.email == email)
        if exclude_id is not None:
            query = query.filter(models.User.id != exclude_id)
        return query.first() is not None

    def add_friend(self, user: User, friend: User, status: FriendStatus) -> User:
        with self.transaction():
            self._put_edge(user.id, friend.id, status)
            if status == FriendStatus.CONFIRMED:
                self._put_edge(friend.id, user.id, FriendStatus.CONFIRMED)
        return self.find_by_id(user.id)

    def remove_friend(self, user: User, friend: User) -> User:
        with self.transaction():
            self._delete(
                self.db.query(Friendship).filter(
                    Friendship.user_id == user.id, Friendship.friend_id == friend.id
                )
            )
            self.db.query(Friendship).filter(
                Friendship.user_id == friend.id,
                Friendship.friend_id == user.id,
                Friendship.status == FriendStatus.CONFIRMED.value
            ).update({"status": FriendStatus.UNCONFIRMED.value}, synchronize_session=False)
        return self.find_by_id(user.id)

    def find_friends(self, user: User) -> List[User]:
        friend_ids = select(Friendship.friend_id).where(Friendship.user_id == user.id)
        return self._find_many(friend_ids)

    def find_common_friends(self, user: User, other_user: User) -> List[User]:
        other = aliased(Friendship)
        common_ids = (
            select(Friendship.friend_id)
            .join(other, other.friend_id == Friendship.friend_id)
            .where(Friendship.user_id == user.id, other.user_id == other_user.id)
        )
        return self._find_many(common_ids)

    def _put_edge(self, user_id: int, friend_id: int, status: FriendStatus) -> None:
        edge = self.db.get(Friendship, (user_id, friend_id))
        if edge is None:
            self.db.add(Friendship(user_id=user_id, friend_id=friend_id, status=status.value))
        elif edge.status != FriendStatus.CONFIRMED.value:
            edge.status = status.value
        self.db.flush()

    def _find_many(self, user_ids) -> List[User]:
        rows = (
            self.db.query(models.User)
            .filter(models.User.id.in_(user_ids))
            .order_by(models.User.id)
            .all()
        )
        return [self._with_friends(row) for row in rows]

    def _friends(self, user_id: int) -> Dict[int, FriendStatus]:
        edges = self.db.query(Friendship.friend_id, Friendship.status).filter(
            Friendship.user_id == user_id
        ).all()
        return {edge.friend_id: FriendStatus(edge.status) for edge in edges}

    def _with_friends(self, row: models.User) -> User:
        user = User.model_validate(row)
        user.friends = self._friends(row.id)
        return user
