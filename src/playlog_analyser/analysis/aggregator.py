"""Per-file aggregation: filter intervals to a window, sum durations."""
from __future__ import annotations

from collections.abc import Iterable

from playlog_analyser.domain.interval import DateWindow, Interval
from playlog_analyser.domain.results import AggregateResult
from playlog_analyser.domain.types import FileStem


def aggregate(
    name: FileStem,
    intervals: Iterable[Interval],
    window: DateWindow,
) -> AggregateResult | None:
    """Sum the durations of the intervals `window` admits.

    Returns None when the total is not positive. That covers files
    with nothing inside the window and files whose admitted intervals
    are all zero-length.
    """
    total = sum(
        interval.duration_seconds
        for interval in intervals
        if window.admits(interval)
    )
    if total <= 0:
        return None
    return AggregateResult(name=name, total_seconds=total)
