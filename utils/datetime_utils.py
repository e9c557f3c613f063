from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def parse_canvas_datetime(value: str) -> datetime:
    """
    Parse Canvas ISO8601 datetime strings into timezone-aware datetimes.
    Canvas typically returns UTC with 'Z'. Example: '2025-10-01T03:59:00Z'.
    """
    if not value:
        raise ValueError("Empty datetime string")
    # Normalize trailing Z to +00:00 for fromisoformat
    normalized = value.replace("Z", "+00:00")
    dt = datetime.fromisoformat(normalized)
    # If naive, assume UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_due_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an assignment's due_at, returning None when absent or unparseable."""
    # Non-string values (e.g. epoch numbers) count as absent
    if not value or not isinstance(value, str):
        return None
    try:
        return parse_canvas_datetime(value)
    except (ValueError, TypeError):
        return None


def to_utc_iso_z(dt: datetime) -> str:
    """Convert any datetime to a UTC ISO8601 string with trailing 'Z'."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt_utc = dt.astimezone(timezone.utc)
    # timespec='seconds' drops microseconds so reruns serialize identically
    return dt_utc.isoformat(timespec="seconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
