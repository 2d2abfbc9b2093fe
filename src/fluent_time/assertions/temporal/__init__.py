"""Temporal assertion implementations."""

from fluent_time.assertions.temporal.datetime_assertions import DateTimeAssertions
from fluent_time.assertions.temporal.range import DateTimeRangeAssertions, TimeSpanCondition
from fluent_time.assertions.temporal.subject import TemporalSubject
from fluent_time.assertions.temporal.window import close_to_window

__all__ = [
    "DateTimeAssertions",
    "DateTimeRangeAssertions",
    "TimeSpanCondition",
    "TemporalSubject",
    "close_to_window",
]
