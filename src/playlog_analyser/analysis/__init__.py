"""Aggregation, ranking and the parallel file pipeline."""

from playlog_analyser.analysis.aggregator import aggregate
from playlog_analyser.analysis.pipeline import (
    LOG_SUFFIX,
    analyse,
    collect,
    compute_totals,
    scan_directory,
)
from playlog_analyser.analysis.ranker import rank

__all__ = [
    "LOG_SUFFIX",
    "aggregate",
    "analyse",
    "collect",
    "compute_totals",
    "rank",
    "scan_directory",
]
