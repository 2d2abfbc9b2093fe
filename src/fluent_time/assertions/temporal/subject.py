"""The value under test."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class TemporalSubject:
    """Immutable holder of a nullable point in time.

    Attributes
    ----------
    value : datetime | None
        The value under test. ``None`` is a valid subject, not an error.
    name : str | None
        Optional description used in failure messages instead of the
        configured context name.
    """

    value: datetime | None
    name: str | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def comparable_with(self, other: datetime) -> bool:
        """Whether the subject can be ordered against ``other``.

        Naive and timezone-aware datetimes cannot be ordered against each
        other; an absent subject is never comparable.
        """
        if self.value is None:
            return False
        return (self.value.utcoffset() is None) == (other.utcoffset() is None)
