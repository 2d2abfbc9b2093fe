"""Rendering of values inside failure messages."""

from datetime import date, datetime, timedelta
from typing import Any


NULL_REPR = "<null>"


def _timespec(value: datetime) -> str:
    if value.microsecond == 0:
        return "seconds"
    if value.microsecond % 1000 == 0:
        return "milliseconds"
    return "microseconds"


def format_timedelta(value: timedelta) -> str:
    """Render a duration as ``1d 2h 3m 4s 5ms``, omitting zero parts.

    >>> format_timedelta(timedelta(hours=2, milliseconds=15))
    '2h 15ms'
    """
    if not value:
        return "0s"

    sign = "-" if value < timedelta(0) else ""
    value = abs(value)

    hours, rem = divmod(value.seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    millis, micros = divmod(value.microseconds, 1000)

    parts = [
        f"{amount}{unit}"
        for amount, unit in (
            (value.days, "d"),
            (hours, "h"),
            (minutes, "m"),
            (seconds, "s"),
            (millis, "ms"),
            (micros, "us"),
        )
        if amount
    ]
    return sign + " ".join(parts)


def format_value(value: Any) -> str:
    """Render ``value`` for a failure message.

    Datetimes and dates are wrapped in angle brackets, durations use the
    compact form of :func:`format_timedelta`, ``None`` renders as ``<null>``
    and anything else falls back to ``repr``.
    """
    if value is None:
        return NULL_REPR
    if isinstance(value, datetime):
        return f"<{value.isoformat(sep=' ', timespec=_timespec(value))}>"
    if isinstance(value, date):
        return f"<{value.isoformat()}>"
    if isinstance(value, timedelta):
        return format_timedelta(value)
    return repr(value)
