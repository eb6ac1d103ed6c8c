from __future__ import annotations

from datetime import datetime, timezone

from ..models import RackDirectory


def feed_timestamp(directory: RackDirectory) -> datetime | None:
    if not directory.last_update:
        return None
    return datetime.fromtimestamp(directory.last_update, tz=timezone.utc)


def is_feed_advanced(previous: datetime | None, current: datetime | None) -> bool:
    if previous is None or current is None:
        return True
    return current > previous
