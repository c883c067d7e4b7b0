from typing import Dict, Set, Tuple

from filmorate.api.films.schemas import Film
from filmorate.api.friends.schemas import FriendStatus
from filmorate.api.genres.schemas import Genre
from filmorate.api.genres.utils import default_genres
from filmorate.api.mpa.schemas import Mpa
from filmorate.api.mpa.utils import default_mpa
from filmorate.api.users.schemas import User


class MemoryStore:
    """
    Хранилище в памяти процесса.
    Создаётся один раз при старте приложения и передаётся в хранилища сущностей.
    Связи (дружба, лайки, жанры фильма) лежат отдельно от самих сущностей,
    так же как таблицы friends, likes и film_genres в БД.
    Синхронизации нет: одновременные записи не защищены.
    """

    def __init__(self):
        # пользователи и фильмы хранятся без связей
        self.users: Dict[int, User] = {}
        self.films: Dict[int, Film] = {}
        # (user_id, friend_id) -> статус
        self.friendships: Dict[Tuple[int, int], FriendStatus] = {}
        # (film_id, user_id)
        self.likes: Set[Tuple[int, int]] = set()
        # (film_id, genre_id)
        self.film_genres: Set[Tuple[int, int]] = set()
        # film_id -> mpa_id
        self.film_mpa: Dict[int, int] = {}
        self.genres: Dict[int, Genre] = default_genres()
        self.mpa: Dict[int, Mpa] = default_mpa()

    @staticmethod
    def next_id(table: Dict[int, object]) -> int:
        return max(table, default=0) + 1
