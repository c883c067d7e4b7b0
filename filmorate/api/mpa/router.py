import logging
from typing import List

from fastapi import APIRouter, Depends, status

from filmorate.api.dependencies import get_mpa_storage, verify_admin_key
from filmorate.api.mpa.schemas import Mpa, MpaCreate, MpaUpdate
from filmorate.api.mpa.service import MpaService
from filmorate.api.mpa.storage import MpaStorage

router = APIRouter(prefix="/mpa", tags=["mpa"])
logger = logging.getLogger(__name__)


def get_mpa_service(mpa_storage: MpaStorage = Depends(get_mpa_storage)) -> MpaService:
    return MpaService(mpa_storage)


@router.get("", response_model=List[Mpa])
async def find_all(mpa_service: MpaService = Depends(get_mpa_service)):
    logger.debug("Find all mpa")
    return mpa_service.find_all()


@router.get("/{mpa_id}", response_model=Mpa)
async def find_by_id(mpa_id: int, mpa_service: MpaService = Depends(get_mpa_service)):
    logger.debug(f"Find mpa by id {mpa_id}")
    return mpa_service.find_by_id(mpa_id)


@router.post(
    "",
    response_model=Mpa,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(verify_admin_key)]
)
async def create(mpa: MpaCreate, mpa_service: MpaService = Depends(get_mpa_service)):
    logger.debug(f"Create mpa: {mpa}")
    return mpa_service.create(mpa)


@router.put("", response_model=Mpa, dependencies=[Depends(verify_admin_key)])
async def update(mpa: MpaUpdate, mpa_service: MpaService = Depends(get_mpa_service)):
    logger.debug(f"Update mpa: {mpa}")
    return mpa_service.update(mpa)


@router.delete("/{mpa_id}", response_model=Mpa, dependencies=[Depends(verify_admin_key)])
async def remove_by_id(mpa_id: int, mpa_service: MpaService = Depends(get_mpa_service)):
    logger.debug(f"Delete mpa {mpa_id}")
    return mpa_service.remove_by_id(mpa_id)
