"""Table output and lookup mode."""

from playlog_analyser.reporting.lookup import (
    TotalsLookup,
    UnknownLogFile,
    query_key,
    run_lookup,
)
from playlog_analyser.reporting.table import (
    NAME_WIDTH,
    TOTAL_WIDTH,
    format_datetime,
    format_row,
    format_window,
    print_ranked,
    round_seconds,
)

__all__ = [
    "NAME_WIDTH",
    "TOTAL_WIDTH",
    "TotalsLookup",
    "UnknownLogFile",
    "format_datetime",
    "format_row",
    "format_window",
    "print_ranked",
    "query_key",
    "round_seconds",
    "run_lookup",
]
