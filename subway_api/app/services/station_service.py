"""
Business logic for stations.

Stations exist so that lines can name their terminal stations.  A
station that is still referenced by a line cannot be deleted.
"""

import logging
import sqlite3
from typing import List

from subway_api.app.core.db import Database
from subway_api.app.core.errors import StationInUseError, StationNotFoundError
from subway_api.app.repositories.station_repository import StationRepository
from subway_api.app.schemas.station import StationCreate, StationRead

logger = logging.getLogger(__name__)


class StationService:
    """Service for managing stations."""

    def __init__(self, db: Database) -> None:
        self.stations = StationRepository(db)

    async def create_station(self, data: StationCreate) -> StationRead:
        station_id = self.stations.insert(data.name)
        logger.info("Created station %s (%s)", station_id, data.name)
        return StationRead(id=station_id, name=data.name)

    async def get_stations(self) -> List[StationRead]:
        return [StationRead(id=row["id"], name=row["name"]) for row in self.stations.find_all()]

    async def delete_station(self, station_id: int) -> None:
        """Delete a station.

        Raises ``StationNotFoundError`` if it does not exist and
        ``StationInUseError`` if a line still starts or ends there.
        """
        if self.stations.find_by_id(station_id) is None:
            raise StationNotFoundError(station_id)
        if self.stations.is_referenced(station_id):
            raise StationInUseError(station_id)
        try:
            self.stations.delete(station_id)
        except sqlite3.IntegrityError as exc:
            # A line may have been created between the check and the delete.
            raise StationInUseError(station_id) from exc
        logger.info("Deleted station %s", station_id)
