"""FastAPI dependency providers for the storage handle and services."""

from fastapi import Depends, Request

from subway_api.app.core.db import Database
from subway_api.app.services.line_service import LineService
from subway_api.app.services.station_service import StationService


def get_database(request: Request) -> Database:
    """Return the database handle attached to the application by ``create_app``."""
    return request.app.state.db


def get_line_service(db: Database = Depends(get_database)) -> LineService:
    return LineService(db)


def get_station_service(db: Database = Depends(get_database)) -> StationService:
    return StationService(db)
