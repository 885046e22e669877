"""Tests for rank: both orders ascending."""
from __future__ import annotations

import pytest

from playlog_analyser.analysis.ranker import rank
from playlog_analyser.domain.ordering import SortOrder
from playlog_analyser.domain.results import AggregateResult


def _results() -> list[AggregateResult]:
    return [
        AggregateResult("beta", 30.0),
        AggregateResult("Alpha", 5.0),
        AggregateResult("alpha", 120.5),
        AggregateResult("gamma", 0.25),
    ]


class TestRank:
    def test_by_name_is_code_point_ascending(self) -> None:
        names = [r.name for r in rank(_results(), SortOrder.NAME)]
        assert names == ["Alpha", "alpha", "beta", "gamma"]

    def test_by_duration_is_smallest_first(self) -> None:
        totals = [r.total_seconds for r in rank(_results(), SortOrder.DURATION)]
        assert totals == [0.25, 5.0, 30.0, 120.5]

    def test_duration_ties_keep_input_order(self) -> None:
        results = [AggregateResult("z", 1.0), AggregateResult("a", 1.0)]
        assert [r.name for r in rank(results, SortOrder.DURATION)] == ["z", "a"]

    def test_empty(self) -> None:
        assert rank([], SortOrder.NAME) == []

    def test_does_not_mutate_input(self) -> None:
        results = _results()
        rank(results, SortOrder.NAME)
        assert results == _results()


class TestSortOrder:
    def test_parse_is_case_insensitive(self) -> None:
        assert SortOrder.parse("Name") is SortOrder.NAME
        assert SortOrder.parse("duration") is SortOrder.DURATION

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Name, Duration"):
            SortOrder.parse("size")

    def test_str(self) -> None:
        assert str(SortOrder.DURATION) == "Duration"
