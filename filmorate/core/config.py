import os
from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Основные настройки приложения.
    Считываются из переменных окружения (.env файл)
    """
    APP_NAME: str = "Filmorate API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"

    # "db" - реляционное хранилище, "memory" - хранилище в памяти процесса
    STORAGE_TYPE: Literal["db", "memory"] = os.getenv("STORAGE_TYPE", "db")

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./filmorate.db"
    )

    ADMIN_KEY: str = os.getenv(
        "ADMIN_KEY",
        "default-admin-key-change-in-production"
    )

    POPULAR_FILMS_COUNT: int = int(
        os.getenv("POPULAR_FILMS_COUNT", "10")
    )

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
