"""Assertions for datetime values."""

import operator
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from fluent_time.assertions._base import AndConstraint, AssertionOptions
from fluent_time.assertions.execution import Execution
from fluent_time.assertions.temporal.range import DateTimeRangeAssertions, TimeSpanCondition
from fluent_time.assertions.temporal.subject import TemporalSubject
from fluent_time.assertions.temporal.window import close_to_window
from fluent_time.config import get_settings


class DateTimeAssertions:
    """Fluent assertions on a possibly absent ``datetime``.

    Every check returns an :class:`AndConstraint` so further checks can be
    chained through ``.and_``. Failures are reported through
    :class:`~fluent_time.assertions.execution.Execution`: they raise
    :class:`AssertionFailedError` unless a collector is active.

    Parameters
    ----------
    value : datetime | None
        The subject under test.
    name : str | None
        Optional description of the subject used in failure messages.

    Examples
    --------
    >>> started = datetime(2015, 3, 10, 10, 0)
    >>> DateTimeAssertions(started).be_after(datetime(2015, 1, 1)).and_.have_month(3)
    """

    def __init__(self, value: datetime | None, name: str | None = None):
        self.subject = TemporalSubject(value, name)

    def __repr__(self) -> str:
        return f"DateTimeAssertions({self.subject.value!r})"

    @property
    def context(self) -> str:
        return self.subject.name or get_settings().context_name

    def _execution(self, name: str, options: AssertionOptions | None, reference: Any) -> Execution:
        return Execution(
            name,
            context=self.context,
            options=options,
            reference=reference,
            actual=self.subject.value,
        )

    def _guard_then_check(
        self,
        execution: Execution,
        prefix: str,
        expected: Any,
        accessor: Callable[[datetime], Any],
        found: Callable[[datetime], Any] | None = None,
    ) -> None:
        """Check a property of the subject only once it is known to exist.

        The presence guard reports ``"<prefix>, but found a <null> DateTime."``
        and returns on failure; ``accessor`` is never called for an absent
        subject.
        """
        present = execution.evaluate(self.subject.has_value).with_reason(
            prefix + ", but found a <null> DateTime.", expected
        )
        if not present:
            return

        value = self.subject.value
        actual = accessor(value)
        shown = found(value) if found else actual
        execution.evaluate(actual == expected).with_reason(prefix + ", but found {1}.", expected, shown)

    def _compare(self, expected: datetime, op: Callable[[datetime, datetime], bool]) -> bool:
        return self.subject.comparable_with(expected) and op(self.subject.value, expected)

    def be(self, expected: datetime, options: AssertionOptions | None = None) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject equals ``expected`` exactly, microseconds included."""
        self._execution("be", options, expected).evaluate(self._compare(expected, operator.eq)).with_reason(
            "Expected {context} to be {0}{reason}, but found {1}.", expected, self.subject.value
        )
        return AndConstraint(self)

    def not_be(
        self, unexpected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject is absent or differs from ``unexpected``."""
        passed = not self.subject.has_value or self._compare(unexpected, operator.ne)
        self._execution("not_be", options, unexpected).evaluate(passed).with_reason(
            "Did not expect {context} to be {0}{reason}.", unexpected
        )
        return AndConstraint(self)

    def be_close_to(
        self, nearby: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject lies within ``precision_ms`` of ``nearby``.

        The window is inclusive on both sides and saturates at the smallest
        and largest representable datetimes. Use this when, for example, a
        database truncates timestamps; use :meth:`be` for an exact match.

        Parameters
        ----------
        nearby : datetime
            Centre of the accepted window.
        options : AssertionOptions or None
            ``precision_ms`` sets the half-width of the window; it defaults to
            ``FluentTimeSettings.default_precision_ms`` (20 ms).
        """
        precision_ms = options.precision_ms if options else None
        if precision_ms is None:
            precision_ms = get_settings().default_precision_ms

        lower, upper = close_to_window(nearby, precision_ms)
        passed = self._compare(lower, operator.ge) and self._compare(upper, operator.le)
        self._execution("be_close_to", options, nearby).evaluate(passed).with_reason(
            "Expected {context} to be within {0} ms from {1}{reason}, but found {2}.",
            precision_ms,
            nearby,
            self.subject.value,
        )
        return AndConstraint(self)

    def be_before(
        self, expected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject is strictly before ``expected``."""
        self._execution("be_before", options, expected).evaluate(self._compare(expected, operator.lt)).with_reason(
            "Expected a {context} before {0}{reason}, but found {1}.", expected, self.subject.value
        )
        return AndConstraint(self)

    def be_on_or_before(
        self, expected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject is before or equal to ``expected``."""
        self._execution("be_on_or_before", options, expected).evaluate(
            self._compare(expected, operator.le)
        ).with_reason("Expected a {context} on or before {0}{reason}, but found {1}.", expected, self.subject.value)
        return AndConstraint(self)

    def be_after(
        self, expected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject is strictly after ``expected``."""
        self._execution("be_after", options, expected).evaluate(self._compare(expected, operator.gt)).with_reason(
            "Expected a {context} after {0}{reason}, but found {1}.", expected, self.subject.value
        )
        return AndConstraint(self)

    def be_on_or_after(
        self, expected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject is after or equal to ``expected``."""
        self._execution("be_on_or_after", options, expected).evaluate(
            self._compare(expected, operator.ge)
        ).with_reason("Expected a {context} on or after {0}{reason}, but found {1}.", expected, self.subject.value)
        return AndConstraint(self)

    def _have_component(
        self, component: str, expected: int, options: AssertionOptions | None
    ) -> AndConstraint["DateTimeAssertions"]:
        execution = self._execution(f"have_{component}", options, expected)
        self._guard_then_check(
            execution, f"Expected {component} {{0}}{{reason}}", expected, operator.attrgetter(component)
        )
        return AndConstraint(self)

    def have_year(self, expected: int, options: AssertionOptions | None = None) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("year", expected, options)

    def have_month(self, expected: int, options: AssertionOptions | None = None) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("month", expected, options)

    def have_day(self, expected: int, options: AssertionOptions | None = None) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("day", expected, options)

    def have_hour(self, expected: int, options: AssertionOptions | None = None) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("hour", expected, options)

    def have_minute(
        self, expected: int, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("minute", expected, options)

    def have_second(
        self, expected: int, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        return self._have_component("second", expected, options)

    def be_same_date_as(
        self, expected: datetime, options: AssertionOptions | None = None
    ) -> AndConstraint["DateTimeAssertions"]:
        """Assert the subject falls on the calendar date of ``expected``.

        Only year, month and day are compared; time of day is ignored.
        """
        expected_date = expected.date()
        execution = self._execution("be_same_date_as", options, expected_date)
        self._guard_then_check(
            execution,
            "Expected a {context} with date {0}{reason}",
            expected_date,
            datetime.date,
            found=lambda value: value,
        )
        return AndConstraint(self)

    # Range entry points. Each returns a request completed by
    # ``compared_to``, ``before`` or ``after``.

    def be_more_than(self, threshold: timedelta) -> DateTimeRangeAssertions["DateTimeAssertions"]:
        """Start asserting that the subject differs by more than ``threshold``."""
        return DateTimeRangeAssertions(self, self.subject, TimeSpanCondition.MORE_THAN, threshold)

    def be_at_least(self, threshold: timedelta) -> DateTimeRangeAssertions["DateTimeAssertions"]:
        """Start asserting that the subject differs by ``threshold`` or more."""
        return DateTimeRangeAssertions(self, self.subject, TimeSpanCondition.AT_LEAST, threshold)

    def be_exactly(self, threshold: timedelta) -> DateTimeRangeAssertions["DateTimeAssertions"]:
        """Start asserting that the subject differs by exactly ``threshold``."""
        return DateTimeRangeAssertions(self, self.subject, TimeSpanCondition.EXACTLY, threshold)

    def be_within(self, threshold: timedelta) -> DateTimeRangeAssertions["DateTimeAssertions"]:
        """Start asserting that the subject differs by ``threshold`` at most."""
        return DateTimeRangeAssertions(self, self.subject, TimeSpanCondition.WITHIN, threshold)

    def be_less_than(self, threshold: timedelta) -> DateTimeRangeAssertions["DateTimeAssertions"]:
        """Start asserting that the subject differs by less than ``threshold``."""
        return DateTimeRangeAssertions(self, self.subject, TimeSpanCondition.LESS_THAN, threshold)
