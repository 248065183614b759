"""
Business logic for subway lines.

``LineService`` owns the line lifecycle: it checks that referenced
stations exist, keeps line names unique, and converts stored rows into
``LineRead`` views.  Failures are reported with the domain errors from
``core.errors``; the API layer decides which status code each one gets.
"""

import logging
import sqlite3
from typing import List

from subway_api.app.core.db import Database
from subway_api.app.core.errors import (
    DuplicateLineNameError,
    InvalidLineError,
    LineNotFoundError,
)
from subway_api.app.repositories.line_repository import LineRepository
from subway_api.app.repositories.station_repository import StationRepository
from subway_api.app.schemas.line import LineCreate, LineRead, LineUpdate
from subway_api.app.schemas.station import StationRead

logger = logging.getLogger(__name__)


class LineService:
    """Service for creating, reading, updating and deleting lines."""

    def __init__(self, db: Database) -> None:
        self.lines = LineRepository(db)
        self.stations = StationRepository(db)

    async def create_line(self, data: LineCreate) -> LineRead:
        """Persist a new line and return its view.

        Raises ``DuplicateLineNameError`` when the name is taken and
        ``InvalidLineError`` when either terminal station is unknown.
        """
        if self.lines.find_by_name(data.name) is not None:
            raise DuplicateLineNameError(data.name)
        known = self.stations.find_by_ids([data.up_station_id, data.down_station_id])
        missing = [sid for sid in (data.up_station_id, data.down_station_id) if sid not in known]
        if missing:
            raise InvalidLineError(f"Unknown station(s): {', '.join(str(sid) for sid in missing)}")
        try:
            line_id = self.lines.insert(
                data.name,
                data.color,
                data.up_station_id,
                data.down_station_id,
                data.distance,
            )
        except sqlite3.IntegrityError as exc:
            # A concurrent request may have taken the name between the check and the insert.
            raise DuplicateLineNameError(data.name) from exc
        logger.info("Created line %s (%s)", line_id, data.name)
        return self.get_line_view(line_id)

    async def get_lines(self) -> List[LineRead]:
        rows = self.lines.find_all()
        station_ids = [sid for row in rows for sid in (row["up_station_id"], row["down_station_id"])]
        stations = self.stations.find_by_ids(station_ids)
        return [self._row_to_line_read(row, stations) for row in rows]

    async def get_line_by_id(self, line_id: int) -> LineRead:
        return self.get_line_view(line_id)

    async def update_line(self, line_id: int, data: LineUpdate) -> LineRead:
        """Apply the provided fields of ``data`` to an existing line."""
        current = self.lines.find_by_id(line_id)
        if current is None:
            raise LineNotFoundError(line_id)
        new_name = data.name if data.name is not None else current["name"]
        new_color = data.color if data.color is not None else current["color"]
        if new_name != current["name"]:
            other = self.lines.find_by_name(new_name)
            if other is not None and other["id"] != line_id:
                raise DuplicateLineNameError(new_name)
        try:
            updated = self.lines.update(line_id, new_name, new_color)
        except sqlite3.IntegrityError as exc:
            raise DuplicateLineNameError(new_name) from exc
        if not updated:
            raise LineNotFoundError(line_id)
        logger.info("Updated line %s: %s", line_id, data.model_dump(exclude_unset=True))
        return self.get_line_view(line_id)

    async def delete_line(self, line_id: int) -> None:
        if not self.lines.delete(line_id):
            raise LineNotFoundError(line_id)
        logger.info("Deleted line %s", line_id)

    def get_line_view(self, line_id: int) -> LineRead:
        row = self.lines.find_by_id(line_id)
        if row is None:
            raise LineNotFoundError(line_id)
        stations = self.stations.find_by_ids([row["up_station_id"], row["down_station_id"]])
        return self._row_to_line_read(row, stations)

    @staticmethod
    def _row_to_line_read(row: sqlite3.Row, stations: dict[int, sqlite3.Row]) -> LineRead:
        """Convert a line row and its station rows to a ``LineRead``."""
        terminals = []
        for station_id in (row["up_station_id"], row["down_station_id"]):
            station = stations.get(station_id)
            if station is not None:
                terminals.append(StationRead(id=station["id"], name=station["name"]))
        return LineRead(id=row["id"], name=row["name"], color=row["color"], stations=terminals)
