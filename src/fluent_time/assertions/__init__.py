"""Assertion library for temporal values."""

from fluent_time.assertions._base import (
    AndConstraint,
    AssertionFailedError,
    AssertionMetadata,
    AssertionOptions,
    AssertionResult,
)
from fluent_time.assertions.execution import Execution, Verdict, format_reason
from fluent_time.assertions.temporal import (
    DateTimeAssertions,
    DateTimeRangeAssertions,
    TemporalSubject,
    TimeSpanCondition,
)

__all__ = [
    "AndConstraint",
    "AssertionFailedError",
    "AssertionMetadata",
    "AssertionOptions",
    "AssertionResult",
    "Execution",
    "Verdict",
    "format_reason",
    "DateTimeAssertions",
    "DateTimeRangeAssertions",
    "TemporalSubject",
    "TimeSpanCondition",
]
