"""playlog-analyser CLI entry point.

Usage:
    playlog-analyser [--path DIR] [-s START] [-e END] [--order Name|Duration]
    playlog-analyser compare [--path DIR] < names.txt
"""
import argparse
import logging
import os
import sys
from datetime import datetime

from playlog_analyser.domain.ordering import SortOrder

log = logging.getLogger(__name__)


def _parse_datetime(text: str) -> datetime:
    """argparse type: ISO-8601 date/datetime, naive values taken as local."""
    try:
        value = datetime.fromisoformat(text.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date/time {text!r} (expected ISO-8601, e.g. 2024-01-31 or 2024-01-31T18:00)"
        ) from None
    return value.astimezone()


def _parse_order(text: str) -> SortOrder:
    try:
        return SortOrder.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _add_common_arguments(p: argparse.ArgumentParser, *, suppress: bool) -> None:
    # On the subcommand the defaults are suppressed so values given
    # before "compare" are not overwritten.
    p.add_argument(
        "--path",
        default=argparse.SUPPRESS if suppress else os.getcwd(),
        help="Log directory to scan for *.dat files (default: current directory)",
    )
    p.add_argument(
        "--workers", type=int,
        default=argparse.SUPPRESS if suppress else None,
        help="Thread pool size for per-file parsing (default: executor default)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Enable debug logging on stderr.",
    )


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Look up totals for file names read from stdin, one per line.",
    )
    _add_common_arguments(p, suppress=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playlog-analyser",
        description="MPV playlog analyser -- rank log files by time played.",
    )
    _add_common_arguments(parser, suppress=False)
    parser.add_argument(
        "-s", "--start", type=_parse_datetime, default=None,
        help="Start date filter, applied to interval starts (default: Unix epoch)",
    )
    parser.add_argument(
        "-e", "--end", type=_parse_datetime, default=None,
        help="End date filter, applied to interval ends (default: now)",
    )
    parser.add_argument(
        "--order", type=_parse_order, default=None,
        help="Sort ordering: Name or Duration (default: Duration)",
    )
    subparsers = parser.add_subparsers(dest="command")
    _add_compare_parser(subparsers)
    return parser


def _run_analyse(args: argparse.Namespace) -> None:
    from playlog_analyser.analysis.pipeline import analyse
    from playlog_analyser.domain.interval import DateWindow
    from playlog_analyser.reporting.table import format_window, print_ranked

    all_time = DateWindow.all_time()
    window = DateWindow(
        start=args.start if args.start is not None else all_time.start,
        end=args.end if args.end is not None else all_time.end,
    )
    order = args.order if args.order is not None else SortOrder.DURATION

    print(format_window(window))
    results = analyse(args.path, window, order, max_workers=args.workers)
    print_ranked(results)


def _run_compare(args: argparse.Namespace) -> None:
    from playlog_analyser.analysis.pipeline import compute_totals
    from playlog_analyser.reporting.lookup import TotalsLookup, run_lookup

    lookup = TotalsLookup(compute_totals(args.path, max_workers=args.workers))
    log.debug("Loaded totals for %d file(s)", len(lookup))
    misses = run_lookup(lookup, (line.rstrip("\r\n") for line in sys.stdin))
    log.debug("Lookup finished with %d miss(es)", misses)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "compare":
        given = [
            flag for flag, value in (
                ("--start", args.start), ("--end", args.end), ("--order", args.order),
            )
            if value is not None
        ]
        if given:
            parser.error(f"{', '.join(given)} not allowed with compare")
        _run_compare(args)
    else:
        _run_analyse(args)


if __name__ == "__main__":
    main()
