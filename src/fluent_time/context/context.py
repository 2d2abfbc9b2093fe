from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from fluent_time.assertions._base import AssertionResult


ASSERTION_RESULTS_COLLECTOR: ContextVar[list[AssertionResult] | None] = ContextVar(
    "assertion_results_collector", default=None
)


def get_assertions_collector() -> list[AssertionResult] | None:
    """Get the active results collector, or None when failures should raise."""
    return ASSERTION_RESULTS_COLLECTOR.get()


@contextmanager
def assertions_collector(ctx: list[AssertionResult]) -> Iterator[None]:
    """Collect failed assertions into ``ctx`` instead of raising them.

    Parameters
    ----------
    ctx : list[AssertionResult]
        List that receives every failing result reported inside the block.
    """
    token = ASSERTION_RESULTS_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        ASSERTION_RESULTS_COLLECTOR.reset(token)
