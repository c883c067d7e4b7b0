from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class MpaBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class Mpa(MpaBase):
    id: int = Field(..., description="ID рейтинга")
    name: str = Field(..., description="Название рейтинга")
    description: Optional[str] = Field(None, description="Расшифровка рейтинга")


class MpaCreate(MpaBase):
    name: str = Field(..., min_length=1, max_length=20, description="Название рейтинга")
    description: Optional[str] = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Название рейтинга не может быть пустым")
        return v


class MpaUpdate(MpaBase):
    id: Optional[int] = Field(None, description="ID рейтинга")
    name: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = Field(None, max_length=255)
