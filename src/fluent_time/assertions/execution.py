"""Recording and reporting of assertion outcomes.

An :class:`Execution` is created once per assertion call. It hands out a
:class:`Verdict` for each evaluated condition; a failing verdict renders its
message template and either appends the resulting :class:`AssertionResult`
to the active collector (see :func:`fluent_time.context.assertions_collector`)
or raises :class:`AssertionFailedError`.

Once a verdict has failed, any further ``evaluate`` on the same execution is
skipped: it neither checks nor reports.
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fluent_time.assertions._base import (
    AssertionFailedError,
    AssertionMetadata,
    AssertionOptions,
    AssertionResult,
)
from fluent_time.assertions.formatting import format_value
from fluent_time.context import get_assertions_collector

logger = logging.getLogger(__name__)


def format_reason(reason: str, reason_args: tuple[Any, ...] = ()) -> str:
    """Render the ``{reason}`` placeholder text.

    Returns an empty string for a blank reason, otherwise the formatted
    phrase with ``"because"`` prepended when missing and a leading space.

    >>> format_reason("the {0} job is late", "nightly")
    ' because the nightly job is late'
    """
    if not reason or not reason.strip():
        return ""

    text = reason.format(*reason_args) if reason_args else reason
    text = text.strip()
    if not text.lower().startswith("because"):
        text = f"because {text}"
    return f" {text}"


class Verdict:
    """Outcome of a single ``Execution.evaluate`` call."""

    def __init__(self, execution: "Execution", passed: bool, skipped: bool = False):
        self._execution = execution
        self.passed = passed
        self.skipped = skipped

    def with_reason(self, template: str, *args: Any) -> bool:
        """Report ``template`` if the condition failed.

        Parameters
        ----------
        template : str
            Message with ``{0}``-style positional placeholders plus the named
            ``{context}`` and ``{reason}`` placeholders.
        *args : Any
            Values substituted into the positional placeholders, rendered with
            :func:`~fluent_time.assertions.formatting.format_value`.

        Returns
        -------
        bool
            ``True`` when the condition held, ``False`` when it failed or the
            verdict was skipped.

        Raises
        ------
        AssertionFailedError
            If the condition failed and no collector is active.
        """
        if self.skipped:
            return False
        if not self.passed:
            self._execution.report(template, *args)
        return self.passed

    def __bool__(self) -> bool:
        return self.passed


class Execution:
    """Reporting scope for one assertion call.

    Parameters
    ----------
    name : str
        Assertion name recorded in the result metadata.
    context : str
        Description of the subject substituted for ``{context}``.
    options : AssertionOptions or None
        Caller options; only the reason fields are used here.
    reference : Any
        Expected value recorded in the result metadata.
    actual : Any
        Subject value recorded in the result metadata.
    """

    def __init__(
        self,
        name: str,
        *,
        context: str,
        options: AssertionOptions | None = None,
        reference: Any = None,
        actual: Any = None,
    ):
        self.name = name
        self.context = context
        self.options = options or AssertionOptions()
        self.reference = reference
        self.actual = actual
        self.failed = False

    @property
    def reason(self) -> str:
        return format_reason(self.options.reason, self.options.reason_args)

    def evaluate(self, condition: bool) -> Verdict:
        """Wrap ``condition`` in a verdict, or skip it after a prior failure."""
        if self.failed:
            logger.debug("Skipping check in %s after an earlier failure", self.name)
            return Verdict(self, passed=False, skipped=True)
        return Verdict(self, passed=bool(condition))

    def render(self, template: str, *args: Any) -> str:
        return template.format(
            *(format_value(arg) for arg in args),
            context=self.context,
            reason=self.reason,
        )

    def report(self, template: str, *args: Any) -> AssertionResult:
        """Record a failure and surface it to the caller.

        Returns
        -------
        AssertionResult
            The recorded result, when a collector is active.

        Raises
        ------
        AssertionFailedError
            When no collector is active.
        """
        self.failed = True
        message = self.render(template, *args)
        result = AssertionResult(
            metadata=AssertionMetadata(
                name=self.name,
                uuid=uuid4(),
                timestamp=datetime.now(timezone.utc),
                reference=self.reference,
                actual=self.actual,
            ),
            passed=False,
            message=message,
        )
        logger.debug("%s failed: %s", self.name, message)

        collector = get_assertions_collector()
        if collector is None:
            raise AssertionFailedError(result)
        collector.append(result)
        return result
