"""Lenient instant parsing shared by the signature, scoring and form checks."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_instant(value: Any) -> datetime | None:
    """
    Parse a timestamp-like value into an aware UTC datetime.

    Accepts datetimes, dates, epoch milliseconds and ISO 8601 strings
    (a trailing ``Z`` is read as UTC). Naive values are taken as UTC.
    Returns None when the value cannot be read as an instant.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_after_epoch(value: Any) -> bool:
    """True when ``value`` parses to an instant strictly after 1970-01-01T00:00Z."""
    parsed = parse_instant(value)
    return parsed is not None and parsed > EPOCH
