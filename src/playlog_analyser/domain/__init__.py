"""Domain model for playlog-analyser.

Re-exports all public types for convenient access:
    from playlog_analyser.domain import Interval, DateWindow, SortOrder
"""
from playlog_analyser.domain.interval import DateWindow, Interval
from playlog_analyser.domain.ordering import SortOrder
from playlog_analyser.domain.results import AggregateResult
from playlog_analyser.domain.types import FileStem, Millis, Seconds

__all__ = [
    "AggregateResult",
    "DateWindow",
    "Interval",
    "SortOrder",
    "FileStem",
    "Millis",
    "Seconds",
]
