"""Parse one log line into an Interval, a Skip, or a Fatal.

Line format: "<startMillis> <endMillis>", both floating-point Unix-epoch
milliseconds, start <= end.

The three outcomes are plain values rather than exceptions because the
reader treats them as distinct control paths:
    Item  -> yield the interval
    Skip  -> move on to the next line (blank lines)
    Fatal -> report and stop reading this file
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TypeAlias

from playlog_analyser.domain.interval import Interval
from playlog_analyser.domain.types import Millis

SPLIT_FAILED = "line split does not yield 2 parts"
BAD_TIME_RECORDS = "bad time records"

# Plain decimal or exponent literal. float() alone also takes "1_000",
# non-ASCII digits and "infinity", none of which belong in a log file.
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class Item:
    interval: Interval


@dataclass(frozen=True, slots=True)
class Skip:
    pass


@dataclass(frozen=True, slots=True)
class Fatal:
    message: str


LineOutcome: TypeAlias = Item | Skip | Fatal


def millis_to_local(millis: Millis) -> datetime:
    """Unix epoch + millis, as an aware datetime in the local zone.

    Raises OverflowError/ValueError/OSError for values a datetime
    cannot hold (huge magnitudes, NaN, inf).
    """
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).astimezone()


def _to_millis(token: str) -> Millis:
    if not _NUMBER.fullmatch(token):
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)


def parse_line(line: str) -> LineOutcome:
    """Classify a single line. Never raises for malformed input."""
    parts = line.split()
    if not parts:
        return Skip()
    if len(parts) != 2:
        return Fatal(SPLIT_FAILED)

    try:
        start_ms = _to_millis(parts[0])
        end_ms = _to_millis(parts[1])
    except ValueError as exc:
        return Fatal(str(exc))

    if start_ms > end_ms:
        return Fatal(BAD_TIME_RECORDS)

    try:
        start = millis_to_local(start_ms)
        end = millis_to_local(end_ms)
    except (OverflowError, ValueError, OSError) as exc:
        return Fatal(str(exc))

    return Item(Interval(start=start, end=end))
