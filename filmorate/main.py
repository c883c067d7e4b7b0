import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from filmorate.api.films.router import router as films_router
from filmorate.api.friends.router import router as friends_router
from filmorate.api.genres.router import router as genres_router
from filmorate.api.health.router import router as health_router
from filmorate.api.mpa.router import router as mpa_router
from filmorate.api.users.router import router as users_router
from filmorate.core.config import settings
from filmorate.core.exceptions import FilmorateError
from filmorate.database.backends import StorageBackend, create_backend

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "backend", None) is None:
        app.state.backend = create_backend(settings.STORAGE_TYPE)
    yield


def create_app(backend: Optional[StorageBackend] = None) -> FastAPI:
    """
    Собирает приложение.
    Хранилище можно передать явно, иначе оно создаётся при старте по STORAGE_TYPE.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API для Filmorate",
        lifespan=lifespan,
    )
    app.state.backend = backend

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(films_router)
    app.include_router(friends_router)
    app.include_router(genres_router)
    app.include_router(health_router)
    app.include_router(mpa_router)
    app.include_router(users_router)

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FilmorateError)
    async def filmorate_error_handler(request: Request, exc: FilmorateError):
        logger.error(f"{type(exc).__name__}: {exc.message}")

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "status_code": exc.status_code
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        violations = [
            {
                "fieldName": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.error(f"Validation error: {violations}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Ошибка валидации",
                "status_code": status.HTTP_400_BAD_REQUEST,
                "violations": violations
            }
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=404,
            content={
                "error": "Не найдено",
                "path": str(request.url),
                "status_code": 404
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={
                "error": "Внутренняя ошибка сервера",
                "status_code": 500
            }
        )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="127.0.0.1",
        port=8080,
        log_level="info",
    )
