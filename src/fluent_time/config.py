"""Runtime configuration for fluent-time assertions."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FluentTimeSettings(BaseSettings):
    """Defaults applied when an assertion call does not override them.

    Environment variables are read without a prefix.

    Attributes
    ----------
    default_precision_ms
        Window used by ``be_close_to`` when no precision is given
        (from ``FLUENT_TIME_PRECISION_MS``).
    context_name
        Description of the subject used in failure messages
        (from ``FLUENT_TIME_CONTEXT_NAME``).
    """

    default_precision_ms: int = Field(default=20, validation_alias="FLUENT_TIME_PRECISION_MS")
    context_name: str = Field(default="date and time", validation_alias="FLUENT_TIME_CONTEXT_NAME")

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
        env_prefix="",
    )

    @field_validator("default_precision_ms")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("default precision must not be negative")
        return v


@lru_cache(maxsize=1)
def get_settings() -> FluentTimeSettings:
    """Return the process-wide settings, loading them on first use."""
    return FluentTimeSettings()
