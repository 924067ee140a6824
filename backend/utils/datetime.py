"""
Datetime helpers.

API payloads carry ISO 8601 strings; request ids embed a millisecond
timestamp in the academy's local time.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union

from django.utils import timezone as dj_timezone


def to_iso(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """
    Serialize a date or datetime for the API.

    Naive datetimes are assumed UTC.
    """
    if value is None:
        return None

    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return value.isoformat()


def id_timestamp(dt: datetime) -> str:
    """
    Millisecond timestamp used as the request id suffix: YYYYMMDDHHmmssSSS.

    Aware datetimes are converted to UTC first.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y%m%d%H%M%S') + f'{dt.microsecond // 1000:03d}'


def local_date(dt: datetime) -> date:
    """Calendar date of dt in the current Django time zone."""
    if dt.tzinfo is None:
        return dt.date()
    return dj_timezone.localdate(dt)
