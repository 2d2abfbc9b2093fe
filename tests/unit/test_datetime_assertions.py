from datetime import datetime, timedelta, timezone

import pytest

from fluent_time import AssertionFailedError, AssertionOptions, assertions_collector, get_settings, should
from fluent_time.assertions import AndConstraint, AssertionResult, DateTimeAssertions


SUBJECT = datetime(2015, 3, 10, 10, 0, 0)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test against the built-in defaults."""
    monkeypatch.delenv("FLUENT_TIME_PRECISION_MS", raising=False)
    monkeypatch.delenv("FLUENT_TIME_CONTEXT_NAME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _failure_message(check) -> str:
    with pytest.raises(AssertionFailedError) as exc_info:
        check()
    return exc_info.value.assertion_result.message


class TestEquality:
    def test_be_passes_for_identical_value(self):
        result = should(SUBJECT).be(datetime(2015, 3, 10, 10, 0, 0))
        assert isinstance(result, AndConstraint)
        assert isinstance(result.and_, DateTimeAssertions)

    def test_be_compares_sub_second_components(self):
        message = _failure_message(lambda: should(SUBJECT).be(SUBJECT + timedelta(milliseconds=15)))
        assert message == (
            "Expected date and time to be <2015-03-10 10:00:00.015>, but found <2015-03-10 10:00:00>."
        )

    def test_be_fails_for_absent_subject(self):
        message = _failure_message(lambda: should(None).be(SUBJECT))
        assert message == "Expected date and time to be <2015-03-10 10:00:00>, but found <null>."

    def test_not_be_passes_for_absent_subject(self):
        should(None).not_be(SUBJECT)

    def test_not_be_fails_when_values_match(self):
        message = _failure_message(lambda: should(SUBJECT).not_be(SUBJECT))
        assert message == "Did not expect date and time to be <2015-03-10 10:00:00>."

    @pytest.mark.parametrize(
        "other",
        [SUBJECT, SUBJECT + timedelta(microseconds=1), SUBJECT - timedelta(days=1)],
    )
    def test_be_and_not_be_are_complements_for_present_subject(self, other: datetime):
        results: list[AssertionResult] = []
        with assertions_collector(results):
            should(SUBJECT).be(other)
            should(SUBJECT).not_be(other)
        assert len(results) == 1

    def test_naive_and_aware_values_fail_both_be_and_not_be(self):
        aware = SUBJECT.replace(tzinfo=timezone.utc)
        results: list[AssertionResult] = []
        with assertions_collector(results):
            should(SUBJECT).be(aware)
            should(SUBJECT).not_be(aware)
        assert [r.metadata.name for r in results] == ["be", "not_be"]


class TestCloseTo:
    def test_within_default_precision(self):
        should(SUBJECT).be_close_to(SUBJECT + timedelta(milliseconds=15))

    def test_explicit_precision_is_honoured(self):
        nearby = SUBJECT + timedelta(milliseconds=15)
        should(SUBJECT).be_close_to(nearby, AssertionOptions(precision_ms=20))

        message = _failure_message(lambda: should(SUBJECT).be_close_to(nearby, AssertionOptions(precision_ms=10)))
        assert message == (
            "Expected date and time to be within 10 ms from <2015-03-10 10:00:00.015>, "
            "but found <2015-03-10 10:00:00>."
        )

    def test_window_bounds_are_inclusive(self):
        should(SUBJECT).be_close_to(SUBJECT + timedelta(milliseconds=20))
        should(SUBJECT).be_close_to(SUBJECT - timedelta(milliseconds=20))

    def test_just_outside_window_fails(self):
        with pytest.raises(AssertionFailedError):
            should(SUBJECT).be_close_to(SUBJECT + timedelta(milliseconds=20, microseconds=1))

    def test_does_not_underflow_at_minimum(self):
        should(datetime.min).be_close_to(datetime.min, AssertionOptions(precision_ms=1000))
        should(datetime.min + timedelta(milliseconds=500)).be_close_to(
            datetime.min, AssertionOptions(precision_ms=1000)
        )

    def test_does_not_overflow_at_maximum(self):
        should(datetime.max).be_close_to(datetime.max, AssertionOptions(precision_ms=1000))
        should(datetime.max - timedelta(milliseconds=500)).be_close_to(
            datetime.max, AssertionOptions(precision_ms=1000)
        )

    def test_absent_subject_fails(self):
        message = _failure_message(lambda: should(None).be_close_to(SUBJECT))
        assert message.endswith("but found <null>.")

    def test_negative_precision_is_rejected(self):
        with pytest.raises(ValueError):
            AssertionOptions(precision_ms=-1)


class TestOrdering:
    @pytest.mark.parametrize(
        "other",
        [SUBJECT - timedelta(seconds=1), SUBJECT, SUBJECT + timedelta(seconds=1)],
    )
    def test_exactly_one_of_before_equal_after_holds(self, other: datetime):
        results: list[AssertionResult] = []
        with assertions_collector(results):
            should(SUBJECT).be_before(other)
            should(SUBJECT).be(other)
            should(SUBJECT).be_after(other)
        assert len(results) == 2

    @pytest.mark.parametrize(
        "other",
        [SUBJECT - timedelta(seconds=1), SUBJECT, SUBJECT + timedelta(seconds=1)],
    )
    def test_non_strict_ordering_matches_strict_or_equal(self, other: datetime):
        failures: list[AssertionResult] = []
        with assertions_collector(failures):
            should(SUBJECT).be_on_or_before(other)
        expected_pass = SUBJECT < other or SUBJECT == other
        assert (not failures) is expected_pass

        failures.clear()
        with assertions_collector(failures):
            should(SUBJECT).be_on_or_after(other)
        expected_pass = SUBJECT > other or SUBJECT == other
        assert (not failures) is expected_pass

    def test_before_failure_message(self):
        message = _failure_message(lambda: should(SUBJECT).be_before(SUBJECT))
        assert message == "Expected a date and time before <2015-03-10 10:00:00>, but found <2015-03-10 10:00:00>."

    def test_on_or_after_failure_message(self):
        earlier = datetime(2015, 3, 9)
        message = _failure_message(lambda: should(earlier).be_on_or_after(SUBJECT))
        assert message == (
            "Expected a date and time on or after <2015-03-10 10:00:00>, but found <2015-03-09 00:00:00>."
        )

    @pytest.mark.parametrize("method", ["be_before", "be_on_or_before", "be_after", "be_on_or_after"])
    def test_absent_subject_fails_every_ordering(self, method: str):
        with pytest.raises(AssertionFailedError):
            getattr(should(None), method)(SUBJECT)

    def test_naive_against_aware_reports_instead_of_raising_type_error(self):
        with pytest.raises(AssertionFailedError):
            should(SUBJECT).be_before(SUBJECT.replace(tzinfo=timezone.utc) + timedelta(days=1))


class TestComponents:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("have_year", 2015),
            ("have_month", 3),
            ("have_day", 10),
            ("have_hour", 10),
            ("have_minute", 0),
            ("have_second", 0),
        ],
    )
    def test_matching_component_passes(self, method: str, expected: int):
        getattr(should(SUBJECT), method)(expected)

    def test_wrong_year_reports_mismatch(self):
        message = _failure_message(lambda: should(SUBJECT).have_year(2016))
        assert message == "Expected year 2016, but found 2015."

    def test_absent_subject_reports_null(self):
        message = _failure_message(lambda: should(None).have_year(2016))
        assert message == "Expected year 2016, but found a <null> DateTime."

    def test_absent_subject_reports_only_the_guard_failure(self):
        results: list[AssertionResult] = []
        with assertions_collector(results):
            should(None).have_month(5)

        assert len(results) == 1
        assert results[0].message == "Expected month 5, but found a <null> DateTime."
        assert results[0].metadata.actual is None

    def test_mismatched_second(self):
        message = _failure_message(lambda: should(SUBJECT.replace(second=42)).have_second(41))
        assert message == "Expected second 41, but found 42."


class TestSameDate:
    def test_ignores_time_of_day(self):
        should(datetime(2020, 5, 1, 23, 59, 59)).be_same_date_as(datetime(2020, 5, 1, 0, 0, 1))

    def test_different_date_shows_full_subject(self):
        message = _failure_message(
            lambda: should(datetime(2020, 5, 2, 0, 0, 1)).be_same_date_as(datetime(2020, 5, 1, 23, 0))
        )
        assert message == "Expected a date and time with date <2020-05-01>, but found <2020-05-02 00:00:01>."

    def test_absent_subject(self):
        message = _failure_message(lambda: should(None).be_same_date_as(datetime(2020, 5, 1)))
        assert message == "Expected a date and time with date <2020-05-01>, but found a <null> DateTime."


class TestReasonAndChaining:
    def test_because_is_prepended(self):
        options = AssertionOptions.because("the {0} run starts at ten", "nightly")
        message = _failure_message(lambda: should(SUBJECT).have_hour(9, options))
        assert message == "Expected hour 9 because the nightly run starts at ten, but found 10."

    def test_existing_because_is_kept(self):
        options = AssertionOptions(reason="because it is March")
        message = _failure_message(lambda: should(SUBJECT).have_month(4, options))
        assert message == "Expected month 4 because it is March, but found 3."

    def test_subject_name_replaces_context(self):
        message = _failure_message(lambda: should(SUBJECT, name="start time").be_after(SUBJECT))
        assert message.startswith("Expected a start time after <2015-03-10 10:00:00>")

    def test_chain_continues_after_soft_failure(self):
        results: list[AssertionResult] = []
        with assertions_collector(results):
            should(SUBJECT).have_year(2000).and_.have_month(1).and_.have_day(10)

        assert [r.metadata.name for r in results] == ["have_year", "have_month"]

    def test_failure_carries_metadata(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            should(SUBJECT).be_after(SUBJECT)

        result = exc_info.value.assertion_result
        assert result.passed is False
        assert result.metadata.name == "be_after"
        assert result.metadata.reference == SUBJECT
        assert result.metadata.actual == SUBJECT
        assert str(exc_info.value).startswith("be_after failed: Expected a date and time after")
