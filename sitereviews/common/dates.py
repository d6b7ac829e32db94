# sitereviews/common/dates.py
from __future__ import annotations

from datetime import datetime, timezone

from sitereviews.domain.errors import DateFormatError

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def to_iso(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2025-03-04T10:15:00.123Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


def parse_iso(value: str | datetime | None) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value or not str(value).strip():
        raise DateFormatError("empty timestamp")
    s = str(value).strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise DateFormatError(f"unparseable timestamp: {value!r}") from e


def format_review_date(value: str | datetime | None) -> str:
    """Long en-US form ("March 4, 2025"). Unparseable input renders as ''."""
    try:
        dt = parse_iso(value)
    except DateFormatError:
        return ""
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"
