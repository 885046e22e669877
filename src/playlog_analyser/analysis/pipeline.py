"""Directory scan -> parallel per-file aggregation -> ranking.

Architecture:
    Main thread: list the *.dat files, submit one task per file
    Worker threads: ThreadPoolExecutor runs read -> filter -> sum
    Main thread: collect results in submission order, then rank

Tasks share nothing but the DiagnosticSink, which serializes its own
writes. An exception inside a task (unreadable file, say) re-raises
from future.result() and ends the run.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path

from playlog_analyser.analysis.aggregator import aggregate
from playlog_analyser.analysis.ranker import rank
from playlog_analyser.diagnostics import DiagnosticSink
from playlog_analyser.domain.interval import DateWindow
from playlog_analyser.domain.ordering import SortOrder
from playlog_analyser.domain.results import AggregateResult
from playlog_analyser.domain.types import FileStem, Seconds
from playlog_analyser.parsing.file_reader import read_file

log = logging.getLogger(__name__)

LOG_SUFFIX = ".dat"


def scan_directory(path: str | PathLike[str]) -> list[Path]:
    """Return the *.dat files directly inside `path`, sorted by name.

    Not recursive. Raises FileNotFoundError if `path` does not exist
    and NotADirectoryError if it is not a directory.
    """
    directory = Path(path)
    if not directory.exists():
        raise FileNotFoundError(f"log directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"not a directory: {directory}")
    files = sorted(
        p for p in directory.iterdir()
        if p.suffix == LOG_SUFFIX and p.is_file()
    )
    log.debug("Found %d log file(s) in %s", len(files), directory)
    return files


def _aggregate_file(
    path: Path,
    window: DateWindow,
    sink: DiagnosticSink,
) -> AggregateResult | None:
    name = path.stem
    result = aggregate(name, read_file(path, name, sink), window)
    if result is None:
        log.debug("%s: no positive total in window, dropped", name)
    else:
        log.debug("%s: %.3f s", name, result.total_seconds)
    return result


def collect(
    path: str | PathLike[str],
    window: DateWindow,
    *,
    sink: DiagnosticSink | None = None,
    max_workers: int | None = None,
) -> list[AggregateResult]:
    """Aggregate every log file in `path`, unordered.

    Files with no positive total are left out.
    """
    sink = sink or DiagnosticSink()
    files = scan_directory(path)
    if not files:
        return []
    reported_before = sink.emitted
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_aggregate_file, f, window, sink) for f in files
        ]
        results = [future.result() for future in futures]
    log.debug("%d file(s) reported errors", sink.emitted - reported_before)
    return [r for r in results if r is not None]


def analyse(
    path: str | PathLike[str],
    window: DateWindow,
    order: SortOrder,
    *,
    sink: DiagnosticSink | None = None,
    max_workers: int | None = None,
) -> list[AggregateResult]:
    """Full pipeline: scan, aggregate in parallel, rank."""
    return rank(collect(path, window, sink=sink, max_workers=max_workers), order)


def compute_totals(
    path: str | PathLike[str],
    *,
    sink: DiagnosticSink | None = None,
    max_workers: int | None = None,
) -> dict[FileStem, Seconds]:
    """Totals per file stem over all time, for point lookups."""
    results = collect(
        path, DateWindow.all_time(), sink=sink, max_workers=max_workers,
    )
    totals = {r.name: r.total_seconds for r in results}
    log.debug("Computed totals for %d file(s)", len(totals))
    return totals
