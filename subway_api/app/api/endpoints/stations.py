"""Station endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from subway_api.app.api.deps import get_station_service
from subway_api.app.schemas.station import StationCreate, StationRead
from subway_api.app.services.station_service import StationService

router = APIRouter()


@router.post("", response_model=StationRead, status_code=status.HTTP_201_CREATED)
async def create_station(
    station_in: StationCreate,
    response: Response,
    service: StationService = Depends(get_station_service),
) -> StationRead:
    station = await service.create_station(station_in)
    response.headers["Location"] = f"/stations/{station.id}"
    return station


@router.get("", response_model=List[StationRead])
async def get_stations(service: StationService = Depends(get_station_service)) -> List[StationRead]:
    return await service.get_stations()


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_station(
    station_id: int,
    service: StationService = Depends(get_station_service),
) -> None:
    """Delete a station.  Returns 404 if absent and 409 while a line uses it."""
    await service.delete_station(station_id)
    return None
