from datetime import date

from filmorate.api.films.schemas import FilmCreate
from filmorate.api.users.schemas import UserCreate


def make_user(n: int, **overrides) -> UserCreate:
    data = {
        "email": f"user{n}@mail.ru",
        "login": f"user{n}",
        "name": f"Пользователь {n}",
        "birthday": date(1990, 1, n),
    }
    data.update(overrides)
    return UserCreate(**data)


def make_film(n: int, **overrides) -> FilmCreate:
    data = {
        "name": f"Фильм {n}",
        "description": f"Описание фильма {n}",
        "release_date": date(2000, 1, n),
        "duration": 90 + n,
    }
    data.update(overrides)
    return FilmCreate(**data)
