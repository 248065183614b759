"""
Line endpoints.

The handlers only bind HTTP to ``LineService``: validation lives in the
schemas and the service, and domain errors raised by the service are
turned into status codes by ``api.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from subway_api.app.api.deps import get_line_service
from subway_api.app.schemas.line import LineCreate, LineRead, LineUpdate
from subway_api.app.services.line_service import LineService

router = APIRouter()


@router.post("", response_model=LineRead, status_code=status.HTTP_201_CREATED)
async def create_line(
    line_in: LineCreate,
    response: Response,
    service: LineService = Depends(get_line_service),
) -> LineRead:
    """Create a new line.

    Responds with ``Location: /lines/{id}``.  Returns HTTP 400 if the
    name is already used or a terminal station does not exist.
    """
    line = await service.create_line(line_in)
    response.headers["Location"] = f"/lines/{line.id}"
    return line


@router.get("", response_model=List[LineRead])
async def get_lines(service: LineService = Depends(get_line_service)) -> List[LineRead]:
    return await service.get_lines()


@router.get("/{line_id}", response_model=LineRead)
async def get_line_by_id(
    line_id: int,
    service: LineService = Depends(get_line_service),
) -> LineRead:
    """Retrieve a single line by ID.  Returns HTTP 404 if not found."""
    return await service.get_line_by_id(line_id)


@router.put("/{line_id}", response_model=LineRead)
async def update_line(
    line_id: int,
    line_in: LineUpdate,
    service: LineService = Depends(get_line_service),
) -> LineRead:
    """Update the name and/or color of a line."""
    return await service.update_line(line_id, line_in)


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_line(
    line_id: int,
    service: LineService = Depends(get_line_service),
) -> None:
    await service.delete_line(line_id)
    return None
