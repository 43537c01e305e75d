"""SQLite storage for job openings, with soft deletion."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .logger import get_logger
from .schemas import Opening

DEFAULT_PATH = "./db/main.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS openings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TEXT,
    updated_at TEXT,
    deleted_at TEXT,
    role TEXT,
    company TEXT,
    location TEXT,
    remote INTEGER,
    link TEXT,
    salary INTEGER
);
CREATE INDEX IF NOT EXISTS idx_openings_deleted_at ON openings (deleted_at);
"""

_COLUMNS = "id, created_at, updated_at, deleted_at, role, company, location, remote, link, salary"


class OpeningNotFound(LookupError):
    """Raised when no live opening has the requested id."""

    def __init__(self, opening_id: Any) -> None:
        super().__init__("record not found")
        self.opening_id = opening_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_time(text: str | None) -> datetime | None:
    return None if text is None else datetime.fromisoformat(text)


def _store_time(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat()


def _parse_id(opening_id: Any) -> int:
    if isinstance(opening_id, bool):
        raise OpeningNotFound(opening_id)
    if isinstance(opening_id, int):
        return opening_id
    if isinstance(opening_id, str):
        text = opening_id.strip()
        if text.isascii() and text.isdecimal():
            return int(text)
    raise OpeningNotFound(opening_id)


def _from_row(row: sqlite3.Row) -> Opening:
    return Opening(
        id=row["id"],
        created_at=_parse_time(row["created_at"]),
        updated_at=_parse_time(row["updated_at"]),
        deleted_at=_parse_time(row["deleted_at"]),
        role=row["role"],
        company=row["company"],
        location=row["location"],
        remote=bool(row["remote"]),
        link=row["link"],
        salary=row["salary"],
    )


class OpeningStore:
    """A table of job openings in an SQLite database file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.executescript(_SCHEMA)

    def create(
        self,
        role: str,
        company: str,
        location: str,
        remote: bool,
        link: str,
        salary: int,
    ) -> Opening:
        """Insert a new opening and return it with its id and timestamps."""
        now = _now()
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "INSERT INTO openings (created_at, updated_at, deleted_at, role, company,"
                " location, remote, link, salary) VALUES (?, ?, NULL, ?, ?, ?, ?, ?, ?)",
                (_store_time(now), _store_time(now), role, company, location,
                 int(remote), link, salary),
            )
        return Opening(
            id=cursor.lastrowid,
            created_at=now,
            updated_at=now,
            role=role,
            company=company,
            location=location,
            remote=remote,
            link=link,
            salary=salary,
        )

    def get(self, opening_id: int | str) -> Opening:
        """Return the live opening with this id, or raise OpeningNotFound."""
        key = _parse_id(opening_id)
        with self._lock:
            row = self._conn.execute(
                f"SELECT {_COLUMNS} FROM openings WHERE id = ? AND deleted_at IS NULL"
                " ORDER BY id LIMIT 1",
                (key,),
            ).fetchone()
        if row is None:
            raise OpeningNotFound(opening_id)
        return _from_row(row)

    def list(self) -> list[Opening]:
        """Return every live opening in id order."""
        with self._lock:
            rows = self._conn.execute(
                f"SELECT {_COLUMNS} FROM openings WHERE deleted_at IS NULL ORDER BY id"
            ).fetchall()
        return [_from_row(row) for row in rows]

    def save(self, opening: Opening) -> Opening:
        """Write every field of an existing opening and return it as saved."""
        saved = replace(opening, updated_at=_now())
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "UPDATE openings SET created_at = ?, updated_at = ?, role = ?, company = ?,"
                " location = ?, remote = ?, link = ?, salary = ?"
                " WHERE id = ? AND deleted_at IS NULL",
                (_store_time(saved.created_at), _store_time(saved.updated_at), saved.role,
                 saved.company, saved.location, int(saved.remote), saved.link,
                 saved.salary, saved.id),
            )
        if cursor.rowcount == 0:
            raise OpeningNotFound(opening.id)
        return saved

    def delete(self, opening: Opening) -> Opening:
        """Soft-delete an opening and return it with ``deleted_at`` set."""
        deleted = replace(opening, deleted_at=_now())
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "UPDATE openings SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                (_store_time(deleted.deleted_at), opening.id),
            )
        if cursor.rowcount == 0:
            raise OpeningNotFound(opening.id)
        return deleted

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> OpeningStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def initialize_sqlite(path: str | Path = DEFAULT_PATH) -> OpeningStore:
    """Open the database at ``path``, creating the file and its directory if needed."""
    logger = get_logger("sqlite")
    db_path = Path(path)
    if not db_path.exists():
        logger.info("Database file does not exist. Creating a new one.")
        db_path.parent.mkdir(parents=True, exist_ok=True)
        db_path.touch()
    try:
        return OpeningStore(db_path)
    except sqlite3.Error as exc:
        logger.error("Failed to connect to database: %s", exc)
        raise