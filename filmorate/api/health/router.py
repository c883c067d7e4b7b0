from fastapi import APIRouter, Depends

from filmorate.api.dependencies import get_backend
from filmorate.database.backends import StorageBackend

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(backend: StorageBackend = Depends(get_backend)):
    """Проверка работоспособности"""
    if backend.is_healthy():
        return {"status": "healthy", "storage": backend.name}
    return {"status": "unhealthy", "storage": backend.name}
