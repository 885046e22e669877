"""Lazy, single-pass reader for one playback log file."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from os import PathLike

from playlog_analyser.domain.interval import Interval
from playlog_analyser.parsing.line_parser import Fatal, Item, parse_line
from playlog_analyser.diagnostics import DiagnosticSink

log = logging.getLogger(__name__)


def read_file(
    path: str | PathLike[str],
    display_name: str,
    sink: DiagnosticSink,
) -> Iterator[Interval]:
    """Yield the intervals in `path`, in file order.

    Blank lines are skipped silently. The first malformed line is
    reported to `sink` as "{display_name} {message}" and ends the
    sequence; intervals already yielded stay valid.

    The file is opened on first next() and closed when the generator
    finishes or is closed/garbage-collected, including after an early
    break by the caller.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        for lineno, line in enumerate(handle, start=1):
            outcome = parse_line(line)
            if isinstance(outcome, Item):
                yield outcome.interval
            elif isinstance(outcome, Fatal):
                log.debug("%s: giving up at line %d", display_name, lineno)
                sink.emit(f"{display_name} {outcome.message}")
                return
