from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from filmorate.api.friends.schemas import FriendStatus


def _check_login(v: str) -> str:
    if not v or any(ch.isspace() for ch in v):
        raise ValueError("Логин не может быть пустым и содержать пробелы")
    return v


def _check_birthday(v: date) -> date:
    if v > date.today():
        raise ValueError("Дата рождения не может быть в будущем")
    return v


class UserBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class UserCreate(UserBase):
    email: EmailStr = Field(..., description="Email, уникальный")
    login: str = Field(..., min_length=1, max_length=50, description="Логин без пробелов")
    name: Optional[str] = Field(None, max_length=100, description="Отображаемое имя")
    birthday: date = Field(..., description="Дата рождения")

    @field_validator("login")
    @classmethod
    def validate_login(cls, v: str) -> str:
        return _check_login(v)

    @field_validator("birthday")
    @classmethod
    def validate_birthday(cls, v: date) -> date:
        return _check_birthday(v)


class UserUpdate(UserBase):
    """Обновление: перезаписываются только переданные поля."""
    id: Optional[int] = Field(None, description="ID пользователя")
    email: Optional[EmailStr] = None
    login: Optional[str] = Field(None, max_length=50)
    name: Optional[str] = Field(None, max_length=100)
    birthday: Optional[date] = None

    @field_validator("login")
    @classmethod
    def validate_login(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_login(v)

    @field_validator("birthday")
    @classmethod
    def validate_birthday(cls, v: Optional[date]) -> Optional[date]:
        return v if v is None else _check_birthday(v)


class User(UserBase):
    id: int = Field(..., description="ID пользователя")
    email: str
    login: str
    name: str
    birthday: date
    friends: Dict[int, FriendStatus] = Field(default_factory=dict, description="ID друга -> статус")
