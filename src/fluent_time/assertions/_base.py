"""Base assertion classes and result types."""

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


ParentT = TypeVar("ParentT")


class AssertionMetadata(BaseModel):
    """Metadata for an assertion.

    Attributes
    ----------
    name : str
        Human-readable assertion identifier (e.g. ``"be_close_to"``).
    uuid : UUID
        Unique identifier for this evaluation instance.
    timestamp : datetime
        UTC timestamp when the assertion was evaluated.
    reference : Any
        Reference value the assertion compares against.
    actual : Any
        Subject value under test.
    """

    name: str
    uuid: UUID
    timestamp: datetime
    reference: Any
    actual: Any


class AssertionResult(BaseModel):
    """Result of a failed or passed assertion.

    Attributes
    ----------
    metadata : AssertionMetadata
        Contextual details about the evaluated assertion.
    passed : bool
        Whether the assertion passed.
    message : str | None
        Rendered failure message; ``None`` when the assertion passed.
    """

    metadata: AssertionMetadata
    passed: bool
    message: str | None = None


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.metadata.name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)


class AssertionOptions(BaseModel):
    """Optional settings accepted by every assertion call.

    Attributes
    ----------
    reason : str
        Phrase explaining why the assertion is needed. It may contain
        ``str.format`` positional placeholders filled from ``reason_args``.
        ``"because"`` is prepended when the phrase does not start with it.
    reason_args : tuple
        Positional arguments substituted into ``reason``.
    precision_ms : int | None
        Window for ``be_close_to`` in milliseconds. ``None`` uses the
        configured default.
    """

    model_config = ConfigDict(frozen=True)

    reason: str = ""
    reason_args: tuple[Any, ...] = ()
    precision_ms: int | None = None

    @field_validator("precision_ms")
    @classmethod
    def _non_negative_precision(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("precision_ms must not be negative")
        return v

    @classmethod
    def because(cls, reason: str, *reason_args: Any, precision_ms: int | None = None) -> "AssertionOptions":
        """Shorthand for ``AssertionOptions(reason=..., reason_args=...)``.

        Examples
        --------
        >>> AssertionOptions.because("the job runs every {0} minutes", 5)
        """
        return cls(reason=reason, reason_args=reason_args, precision_ms=precision_ms)


class AndConstraint(Generic[ParentT]):
    """Continuation returned by assertions so further checks can be chained.

    Examples
    --------
    >>> should(created).be_after(start).and_.be_before(end)
    """

    def __init__(self, parent: ParentT):
        self._parent = parent

    @property
    def and_(self) -> ParentT:
        return self._parent

    def __repr__(self) -> str:
        return f"AndConstraint({self._parent!r})"
