"""Position router."""
from fastapi import APIRouter, Depends, status
from typing import List

from hiretrack.models.position import PositionModel
from hiretrack.schemas.position import CreatePositionRequest, UpdatePositionRequest
from hiretrack.services.position_service import PositionService
from hiretrack.utils.dependencies import get_position_service, http_error
from hiretrack.utils.exceptions import ServiceError


router = APIRouter(prefix="/api/v1/positions", tags=["Positions"])


@router.get("/", response_model=List[PositionModel])
async def list_positions(service: PositionService = Depends(get_position_service)):
    """List all positions."""
    return await service.get_all()


@router.post("/", response_model=PositionModel, status_code=status.HTTP_201_CREATED)
async def create_position(
    request: CreatePositionRequest,
    service: PositionService = Depends(get_position_service)
):
    """Open a new position."""
    try:
        return await service.create(request.model_dump())
    except ServiceError as e:
        raise http_error(e)


@router.get("/{position_id}", response_model=PositionModel)
async def get_position(
    position_id: int,
    service: PositionService = Depends(get_position_service)
):
    try:
        return await service.get_by_id(position_id)
    except ServiceError as e:
        raise http_error(e)


@router.put("/{position_id}", response_model=PositionModel)
async def update_position(
    position_id: int,
    request: UpdatePositionRequest,
    service: PositionService = Depends(get_position_service)
):
    try:
        return await service.update(position_id, request.model_dump(exclude_unset=True))
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{position_id}", response_model=PositionModel)
async def delete_position(
    position_id: int,
    service: PositionService = Depends(get_position_service)
):
    try:
        return await service.delete(position_id)
    except ServiceError as e:
        raise http_error(e)
