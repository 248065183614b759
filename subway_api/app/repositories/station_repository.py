"""SQL access for the ``stations`` table."""

import sqlite3
from typing import Iterable, List, Optional

from subway_api.app.core.db import Database, is_storable_id


class StationRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    def insert(self, name: str) -> int:
        with self.db.connect() as conn:
            cursor = conn.execute("INSERT INTO stations (name) VALUES (?)", (name,))
            return cursor.lastrowid

    def find_all(self) -> List[sqlite3.Row]:
        with self.db.connect() as conn:
            return conn.execute("SELECT id, name FROM stations ORDER BY id ASC").fetchall()

    def find_by_id(self, station_id: int) -> Optional[sqlite3.Row]:
        if not is_storable_id(station_id):
            return None
        with self.db.connect() as conn:
            return conn.execute(
                "SELECT id, name FROM stations WHERE id = ?",
                (station_id,),
            ).fetchone()

    def find_by_ids(self, station_ids: Iterable[int]) -> dict[int, sqlite3.Row]:
        """Return the stations with the given ids keyed by id; unknown ids are skipped."""
        ids = [sid for sid in set(station_ids) if is_storable_id(sid)]
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        with self.db.connect() as conn:
            rows = conn.execute(
                f"SELECT id, name FROM stations WHERE id IN ({placeholders})",
                ids,
            ).fetchall()
        return {row["id"]: row for row in rows}

    def is_referenced(self, station_id: int) -> bool:
        if not is_storable_id(station_id):
            return False
        with self.db.connect() as conn:
            row = conn.execute(
                "SELECT 1 FROM lines WHERE up_station_id = ? OR down_station_id = ? LIMIT 1",
                (station_id, station_id),
            ).fetchone()
        return row is not None

    def delete(self, station_id: int) -> bool:
        """Delete a station; return ``True`` if a row was removed."""
        if not is_storable_id(station_id):
            return False
        with self.db.connect() as conn:
            cursor = conn.execute("DELETE FROM stations WHERE id = ?", (station_id,))
            return cursor.rowcount > 0
