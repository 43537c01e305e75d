"""The job opening record and its JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def _format_time(moment: datetime) -> str:
    """Render a datetime in RFC 3339 with trailing fraction zeros trimmed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        text += f".{fraction}"
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(kw_only=True)
class Opening:
    """A job opening as stored in the database."""

    id: int = 0
    created_at: datetime = field(default=_ZERO_TIME)
    updated_at: datetime = field(default=_ZERO_TIME)
    deleted_at: datetime | None = None
    role: str = ""
    company: str = ""
    location: str = ""
    remote: bool = False
    link: str = ""
    salary: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping; ``deletedAt`` only when set."""
        data: dict[str, Any] = {
            "id": self.id,
            "createdAt": _format_time(self.created_at),
            "updatedAt": _format_time(self.updated_at),
        }
        if self.deleted_at is not None:
            data["deletedAt"] = _format_time(self.deleted_at)
        data.update(
            role=self.role,
            company=self.company,
            location=self.location,
            remote=self.remote,
            link=self.link,
            salary=self.salary,
        )
        return data