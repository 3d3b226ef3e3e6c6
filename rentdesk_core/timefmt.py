"""
Temporal formatting: store-local display and the rolling 24h lookahead.

Instants come in as ISO 8601 strings (or datetimes) and are compared as
absolute points in time. Display uses the time zone of the store that owns
the field being shown.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rentdesk_core.order import Instant

logger = logging.getLogger(__name__)

PLACEHOLDER = "--"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
LOOKAHEAD = timedelta(hours=24)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current wall-clock time, timezone-aware."""
    return datetime.now(timezone.utc)


def parse_instant(value: Instant) -> datetime:
    """
    Parse an ISO 8601 string (or datetime) into an aware UTC datetime.

    Naive values are read as UTC. Raises ValueError or TypeError when the
    value cannot be read as a point in time, and OverflowError when it falls
    outside the datetime range once shifted to UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip())
    else:
        raise TypeError(f"Unsupported instant type: {type(value).__name__}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def try_parse_instant(value: Instant | None) -> datetime | None:
    """Like parse_instant, but None for absent or malformed values."""
    if value is None or value == "":
        return None
    try:
        return parse_instant(value)
    except (TypeError, ValueError, OverflowError):
        return None


def format_store_time(instant: Instant | None, time_zone: str) -> str:
    """
    Render instant in the given store time zone as YYYY-MM-DD HH:MM:SS.

    Absent instants render as the placeholder. A malformed instant or an
    unknown time zone returns the raw input unchanged; the failure is logged,
    not raised.
    """
    if instant is None or instant == "":
        return PLACEHOLDER
    try:
        dt = parse_instant(instant)
        return dt.astimezone(ZoneInfo(time_zone)).strftime(DISPLAY_FORMAT)
    except (TypeError, ValueError, OverflowError, ZoneInfoNotFoundError) as e:
        logger.warning("Could not render %r in time zone %r: %s", instant, time_zone, e)
        return str(instant)


def is_next_24_hours(instant: Instant | None, now: datetime | None = None) -> bool:
    """
    True iff instant lies in [now, now + 24h], both ends inclusive.

    now defaults to the wall clock, read once per call. Absent or malformed
    instants are never in the window.
    """
    target = try_parse_instant(instant)
    if target is None:
        return False
    ref = parse_instant(now) if now is not None else utc_now()
    diff = target - ref
    return timedelta(0) <= diff <= LOOKAHEAD
