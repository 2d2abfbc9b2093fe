"""Overflow-safe proximity windows."""

from datetime import datetime, timedelta


def close_to_window(nearby: datetime, precision_ms: int) -> tuple[datetime, datetime]:
    """Return the inclusive ``(lower, upper)`` bounds around ``nearby``.

    Each margin is clamped to the distance between ``nearby`` and the
    representable extreme on that side, so the bounds saturate at
    ``datetime.min`` / ``datetime.max`` instead of raising ``OverflowError``.

    Parameters
    ----------
    nearby : datetime
        Centre of the window. Its ``tzinfo`` is carried over to the extremes.
    precision_ms : int
        Requested margin on each side, in milliseconds.

    Returns
    -------
    tuple[datetime, datetime]
        Lower and upper bound, both inclusive.

    Examples
    --------
    >>> close_to_window(datetime.min, 1000)[0] == datetime.min
    True
    """
    precision = timedelta(milliseconds=precision_ms)
    lowest = datetime.min.replace(tzinfo=nearby.tzinfo)
    highest = datetime.max.replace(tzinfo=nearby.tzinfo)

    lower_margin = min(precision, nearby - lowest)
    upper_margin = min(precision, highest - nearby)
    return nearby - lower_margin, nearby + upper_margin
