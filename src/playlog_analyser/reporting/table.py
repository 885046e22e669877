"""Fixed-width text output for ranked results.

Row layout: name left-aligned in 110 columns, a space, the total
rounded half-up to whole seconds right-aligned in 6 columns (with
thousands separators), then " s".
"""
from __future__ import annotations

import sys
from collections.abc import Iterable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TextIO

from playlog_analyser.domain.interval import DateWindow
from playlog_analyser.domain.results import AggregateResult
from playlog_analyser.domain.types import Seconds

NAME_WIDTH = 110
TOTAL_WIDTH = 6
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def round_seconds(total: Seconds) -> int:
    """Round to whole seconds, halves away from zero (2.5 -> 3)."""
    return int(Decimal(total).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_row(name: str, total: Seconds) -> str:
    rounded = round_seconds(total)
    return f"{name:<{NAME_WIDTH}} {rounded:>{TOTAL_WIDTH},} s"


def format_datetime(dt: datetime) -> str:
    return dt.strftime(DATETIME_FORMAT)


def format_window(window: DateWindow) -> str:
    """Header line: "<start> - <end>"."""
    return f"{format_datetime(window.start)} - {format_datetime(window.end)}"


def print_ranked(
    results: Iterable[AggregateResult],
    out: TextIO | None = None,
) -> None:
    """Write one row per result, in the given order."""
    out = out or sys.stdout
    for result in results:
        print(format_row(result.name, result.total_seconds), file=out)
