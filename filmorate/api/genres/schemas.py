from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class GenreBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class Genre(GenreBase):
    id: int = Field(..., description="ID жанра")
    name: str = Field(..., description="Название жанра")


class GenreCreate(GenreBase):
    name: str = Field(..., min_length=1, max_length=100, description="Название жанра")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Название жанра не может быть пустым")
        return v


class GenreUpdate(GenreBase):
    id: Optional[int] = Field(None, description="ID жанра")
    name: Optional[str] = Field(None, max_length=100)
