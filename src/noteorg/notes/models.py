"""The Note record and its JSON mapping."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def now() -> datetime:
    """Current UTC time, truncated to milliseconds."""
    ts = datetime.now(timezone.utc)
    return ts.replace(microsecond=ts.microsecond // 1000 * 1000)


def parse_timestamp(value: str) -> datetime:
    """Parse ISO-8601 text; a trailing ``Z`` or a missing offset is read as UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


@dataclass
class Note:
    """A single note. Only ``body`` changes after creation."""

    title: str
    body: str
    time_added: datetime

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "body": self.body,
            "time_added": self.time_added.isoformat(timespec="milliseconds"),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Note:
        """Build a Note from a decoded JSON object.

        Title and body are trimmed. Raises ValueError when a field is missing,
        not a string, empty, or when the timestamp is not ISO-8601.
        """
        for key in ("title", "body", "time_added"):
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
            if not value.strip():
                raise ValueError(f"field {key!r} is empty")
        return cls(
            title=data["title"].strip(),
            body=data["body"].strip(),
            time_added=parse_timestamp(data["time_added"]),
        )
