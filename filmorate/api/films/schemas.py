from datetime import date
from typing import List, Optional, Set

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from filmorate.api.genres.schemas import Genre
from filmorate.api.mpa.schemas import Mpa

# День первого киносеанса
CINEMA_BIRTHDAY = date(1895, 12, 28)


def _check_name(v: str) -> str:
    if not v.strip():
        raise ValueError("Название не может быть пустым")
    return v


def _check_release_date(v: date) -> date:
    if v <= CINEMA_BIRTHDAY:
        raise ValueError("Дата релиза должна быть позже 28.12.1895")
    return v


def _unique_genres(v: List["GenreRef"]) -> List["GenreRef"]:
    unique = {genre.id: genre for genre in v}
    return [unique[genre_id] for genre_id in sorted(unique)]


class FilmBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class MpaRef(FilmBase):
    """Ссылка на рейтинг в теле запроса. Остальные поля игнорируются."""
    id: int


class GenreRef(FilmBase):
    id: int


class FilmCreate(FilmBase):
    name: str = Field(..., min_length=1, max_length=255, description="Название")
    description: Optional[str] = Field(None, max_length=200, description="Описание")
    release_date: date = Field(..., description="Дата релиза")
    duration: int = Field(..., gt=0, description="Продолжительность, минут")
    mpa: Optional[MpaRef] = None
    genres: Optional[List[GenreRef]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("release_date")
    @classmethod
    def validate_release_date(cls, v: date) -> date:
        return _check_release_date(v)

    @field_validator("genres")
    @classmethod
    def validate_genres(cls, v: Optional[List[GenreRef]]) -> Optional[List[GenreRef]]:
        return v if v is None else _unique_genres(v)


class FilmUpdate(FilmBase):
    """Обновление: перезаписываются только переданные поля."""
    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=200)
    release_date: Optional[date] = None
    duration: Optional[int] = Field(None, gt=0)
    mpa: Optional[MpaRef] = None
    genres: Optional[List[GenreRef]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_name(v)

    @field_validator("release_date")
    @classmethod
    def validate_release_date(cls, v: Optional[date]) -> Optional[date]:
        return v if v is None else _check_release_date(v)

    @field_validator("genres")
    @classmethod
    def validate_genres(cls, v: Optional[List[GenreRef]]) -> Optional[List[GenreRef]]:
        return v if v is None else _unique_genres(v)


class Film(FilmBase):
    id: int
    name: str
    description: Optional[str] = None
    release_date: date
    duration: int
    mpa: Optional[Mpa] = None
    genres: List[Genre] = Field(default_factory=list)
    likes: Set[int] = Field(default_factory=set, description="ID пользователей, поставивших лайк")
