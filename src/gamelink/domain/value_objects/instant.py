"""Conversion of stored timestamps into absolute instants."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def parse_instant(value: Any) -> datetime | None:
    """Return a timezone-aware datetime, or None if value is not an instant.

    Accepts datetimes and ISO-8601 strings (a trailing ``Z`` is allowed).
    Naive values are taken to be UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
