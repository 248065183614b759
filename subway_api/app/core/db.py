"""
SQLite database integration and simple migration system.

``Database`` is the storage handle shared by the repositories.  It
knows where the database file lives, hands out connections
(``connect``) and applies migrations on application start (``init``).
The handle is created once by ``create_app`` and passed explicitly to
every service, so tests can point each application at its own file.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER column can hold.
SQLITE_MAX_INTEGER = 2**63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: stations and lines
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS stations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS lines (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            color TEXT NOT NULL,
            up_station_id INTEGER NOT NULL,
            down_station_id INTEGER NOT NULL,
            distance INTEGER NOT NULL,
            FOREIGN KEY(up_station_id) REFERENCES stations(id),
            FOREIGN KEY(down_station_id) REFERENCES stations(id)
        );
        """,
    ),
]


def is_storable_id(value: int) -> bool:
    """Return ``True`` if ``value`` can be an autoincrement row id."""
    return 0 < value <= SQLITE_MAX_INTEGER


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative paths are resolved
    against the project root (the directory containing ``subway_api``).
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Handle to a single SQLite database file."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be
        accessed by name.  Foreign key enforcement is switched on for
        every connection because SQLite disables it by default.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection, commit on success and always close it."""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init(self) -> None:
        """Create the database file if needed and apply pending migrations."""
        with self.connect() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current = row["version"] or 0
            for version, script in MIGRATIONS:
                if version <= current:
                    continue
                logger.info("Applying migration %s to %s", version, self.path)
                conn.executescript(script)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
