"""Ordering of aggregate results.

Both orders are ascending: by name (code point order), or by total
seconds with the least-played file first. sorted() is stable, so
equal totals keep their input order.
"""
from __future__ import annotations

from collections.abc import Iterable

from playlog_analyser.domain.ordering import SortOrder
from playlog_analyser.domain.results import AggregateResult


def rank(
    results: Iterable[AggregateResult],
    order: SortOrder,
) -> list[AggregateResult]:
    if order is SortOrder.NAME:
        return sorted(results, key=lambda r: r.name)
    if order is SortOrder.DURATION:
        return sorted(results, key=lambda r: r.total_seconds)
    raise NotImplementedError(f"no ranking for {order!r}")
