"""
SQL access for the ``lines`` table.

Every method runs in its own connection, so a single insert, update or
delete is atomic.  ``sqlite3.IntegrityError`` raised by the ``UNIQUE``
constraint on ``name`` is left for the service to translate.  Ids outside
the SQLite integer range cannot exist and are reported as absent.
"""

import sqlite3
from typing import List, Optional

from subway_api.app.core.db import Database, is_storable_id

_COLUMNS = "id, name, color, up_station_id, down_station_id, distance"


class LineRepository:
    """Repository for line records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def insert(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> int:
        """Insert a line and return its new id."""
        with self.db.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO lines (name, color, up_station_id, down_station_id, distance)
                VALUES (?, ?, ?, ?, ?)
                """,
                (name, color, up_station_id, down_station_id, distance),
            )
            return cursor.lastrowid

    def find_all(self) -> List[sqlite3.Row]:
        with self.db.connect() as conn:
            return conn.execute(f"SELECT {_COLUMNS} FROM lines ORDER BY id ASC").fetchall()

    def find_by_id(self, line_id: int) -> Optional[sqlite3.Row]:
        if not is_storable_id(line_id):
            return None
        with self.db.connect() as conn:
            return conn.execute(
                f"SELECT {_COLUMNS} FROM lines WHERE id = ?",
                (line_id,),
            ).fetchone()

    def find_by_name(self, name: str) -> Optional[sqlite3.Row]:
        with self.db.connect() as conn:
            return conn.execute(
                f"SELECT {_COLUMNS} FROM lines WHERE name = ?",
                (name,),
            ).fetchone()

    def update(self, line_id: int, name: str, color: str) -> bool:
        """Overwrite name and color; return ``True`` if the line existed."""
        if not is_storable_id(line_id):
            return False
        with self.db.connect() as conn:
            cursor = conn.execute(
                "UPDATE lines SET name = ?, color = ? WHERE id = ?",
                (name, color, line_id),
            )
            return cursor.rowcount > 0

    def delete(self, line_id: int) -> bool:
        """Delete a line; return ``True`` if a row was removed."""
        if not is_storable_id(line_id):
            return False
        with self.db.connect() as conn:
            cursor = conn.execute("DELETE FROM lines WHERE id = ?", (line_id,))
            return cursor.rowcount > 0
