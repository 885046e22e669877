"""Lookup mode: answer per-file totals for names read from a stream.

The totals are computed once, up front, over all time. Each input line
is then one query. A query may carry a directory or an extension
("a", "a.dat", "logs/a.dat" all mean "a"). Misses are reported on the
diagnostic stream and the loop carries on.
"""
from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from pathlib import PurePath
from typing import TextIO

from playlog_analyser.diagnostics import DiagnosticSink
from playlog_analyser.domain.types import FileStem, Seconds
from playlog_analyser.reporting.table import format_row


class UnknownLogFile(LookupError):
    """Raised when a query names a file with no recorded total."""

    def __init__(self, key: FileStem) -> None:
        super().__init__(f"no totals recorded for {key!r}")
        self.key = key


def query_key(query: str) -> FileStem:
    """Reduce a query line to a file stem."""
    return PurePath(query.strip()).stem


class TotalsLookup:
    """Read-only map from file stem to total seconds."""

    def __init__(self, totals: Mapping[FileStem, Seconds]) -> None:
        self._totals = dict(totals)

    def __len__(self) -> int:
        return len(self._totals)

    def get(self, query: str) -> tuple[FileStem, Seconds]:
        """Return (stem, total) for `query`.

        Raises UnknownLogFile if the stem is not in the map.
        """
        key = query_key(query)
        try:
            return key, self._totals[key]
        except KeyError:
            raise UnknownLogFile(key) from None


def run_lookup(
    lookup: TotalsLookup,
    queries: Iterable[str],
    *,
    out: TextIO | None = None,
    sink: DiagnosticSink | None = None,
) -> int:
    """Answer each query in order. Returns the number of misses."""
    out = out or sys.stdout
    sink = sink or DiagnosticSink()
    misses = 0
    for query in queries:
        try:
            key, total = lookup.get(query)
        except UnknownLogFile as exc:
            misses += 1
            sink.emit(f"{type(exc).__name__}: {exc}")
            continue
        print(format_row(key, total), file=out)
    return misses
