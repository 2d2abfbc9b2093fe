"""fluent-time - Fluent assertions for datetime values."""

from datetime import datetime

from .assertions import (
    AndConstraint,
    AssertionFailedError,
    AssertionOptions,
    AssertionResult,
    DateTimeAssertions,
    DateTimeRangeAssertions,
    TimeSpanCondition,
)
from .config import FluentTimeSettings, get_settings
from .context import assertions_collector
from .version import __version__


def should(value: datetime | None, name: str | None = None) -> DateTimeAssertions:
    """Start a chain of assertions on ``value``.

    >>> should(order.shipped_at, name="shipped at").be_after(order.created_at)
    """
    return DateTimeAssertions(value, name=name)


__all__ = [
    # Entry point
    "should",
    # Assertions
    "DateTimeAssertions",
    "DateTimeRangeAssertions",
    "TimeSpanCondition",
    "AndConstraint",
    "AssertionOptions",
    "AssertionResult",
    "AssertionFailedError",
    # Scope and configuration
    "assertions_collector",
    "FluentTimeSettings",
    "get_settings",
    "__version__",
]
