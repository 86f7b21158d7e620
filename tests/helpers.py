from __future__ import annotations

from datetime import datetime, timezone


def ts(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)
