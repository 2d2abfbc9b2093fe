"""Assertions on the distance between two datetimes."""

import operator
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum
from typing import Generic, TypeVar

from fluent_time.assertions._base import AndConstraint, AssertionOptions
from fluent_time.assertions.execution import Execution
from fluent_time.assertions.temporal.subject import TemporalSubject
from fluent_time.config import get_settings


ParentT = TypeVar("ParentT")


class TimeSpanCondition(str, Enum):
    """How a measured distance must relate to the threshold."""

    MORE_THAN = "more than"
    AT_LEAST = "at least"
    EXACTLY = "exactly"
    WITHIN = "within"
    LESS_THAN = "less than"

    @property
    def description(self) -> str:
        return self.value

    def is_matched_by(self, distance: timedelta, threshold: timedelta) -> bool:
        return _MATCHERS[self](distance, threshold)


_MATCHERS: dict[TimeSpanCondition, Callable[[timedelta, timedelta], bool]] = {
    TimeSpanCondition.MORE_THAN: operator.gt,
    TimeSpanCondition.AT_LEAST: operator.ge,
    TimeSpanCondition.EXACTLY: operator.eq,
    TimeSpanCondition.WITHIN: operator.le,
    TimeSpanCondition.LESS_THAN: operator.lt,
}


class DateTimeRangeAssertions(Generic[ParentT]):
    """Pending comparison of the subject against a second datetime.

    Created by ``be_more_than``, ``be_at_least``, ``be_exactly``,
    ``be_within`` and ``be_less_than``. Nothing is compared until one of
    :meth:`compared_to`, :meth:`before` or :meth:`after` supplies the other
    value.

    Parameters
    ----------
    parent : ParentT
        Assertions object returned by the completing call for chaining.
    subject : TemporalSubject
        The value under test.
    condition : TimeSpanCondition
        Comparison mode; fixed for the lifetime of the request.
    threshold : timedelta
        Caller-supplied duration; must not be negative.

    Raises
    ------
    ValueError
        If ``threshold`` is negative.

    Examples
    --------
    >>> should(finished).be_within(timedelta(minutes=5)).after(started)
    """

    def __init__(
        self,
        parent: ParentT,
        subject: TemporalSubject,
        condition: TimeSpanCondition,
        threshold: timedelta,
    ):
        if threshold < timedelta(0):
            raise ValueError(f"threshold must not be negative, got {threshold!r}")
        self._parent = parent
        self._subject = subject
        self._condition = condition
        self._threshold = threshold

    @property
    def subject(self) -> TemporalSubject:
        return self._subject

    @property
    def condition(self) -> TimeSpanCondition:
        return self._condition

    @property
    def threshold(self) -> timedelta:
        return self._threshold

    def __repr__(self) -> str:
        return (
            f"DateTimeRangeAssertions({self._subject.value!r}, "
            f"{self._condition.description} {self._threshold!r})"
        )

    def compared_to(self, counterpart: datetime, options: AssertionOptions | None = None) -> AndConstraint[ParentT]:
        """Compare the absolute distance between the subject and ``counterpart``."""
        return self._assert_distance(counterpart, options, "from", lambda value: abs(value - counterpart))

    def before(self, target: datetime, options: AssertionOptions | None = None) -> AndConstraint[ParentT]:
        """Assert the subject lies before ``target`` by the required distance.

        A subject after ``target`` fails regardless of the mode.
        """
        return self._assert_distance(target, options, "before", lambda value: target - value, opposite="after")

    def after(self, target: datetime, options: AssertionOptions | None = None) -> AndConstraint[ParentT]:
        """Assert the subject lies after ``target`` by the required distance.

        A subject before ``target`` fails regardless of the mode.
        """
        return self._assert_distance(target, options, "after", lambda value: value - target, opposite="before")

    def _assert_distance(
        self,
        counterpart: datetime,
        options: AssertionOptions | None,
        relation: str,
        measure: Callable[[datetime], timedelta],
        opposite: str | None = None,
    ) -> AndConstraint[ParentT]:
        value = self._subject.value
        execution = Execution(
            f"be_{self._condition.name.lower()}",
            context=self._subject.name or get_settings().context_name,
            options=options,
            reference=counterpart,
            actual=value,
        )
        expectation = f" to be {self._condition.description} {{1}} {relation} {{2}}{{reason}}"
        args = (value, self._threshold, counterpart)

        if not execution.evaluate(self._subject.has_value).with_reason(
            "Expected {context}" + expectation + ", but found a <null> DateTime.", *args
        ):
            return AndConstraint(self._parent)

        if not execution.evaluate(self._subject.comparable_with(counterpart)).with_reason(
            "Expected {context} {0}" + expectation + ", but a naive and a timezone-aware value cannot be compared.",
            *args,
        ):
            return AndConstraint(self._parent)

        distance = measure(value)
        if opposite and not execution.evaluate(distance >= timedelta(0)).with_reason(
            "Expected {context} {0}" + expectation + f", but it is {{3}} {opposite} it.", *args, -distance
        ):
            return AndConstraint(self._parent)

        execution.evaluate(self._condition.is_matched_by(distance, self._threshold)).with_reason(
            "Expected {context} {0}" + expectation + ", but it differs {3}.", *args, distance
        )
        return AndConstraint(self._parent)
