"""Builders for time values used across the test suite."""
from __future__ import annotations

from datetime import datetime, timezone

from playlog_analyser.domain.interval import DateWindow, Interval

# 2024-01-01T00:00:00Z in epoch milliseconds
BASE_MS = 1_704_067_200_000
HOUR_MS = 3_600_000


def local(ms: float) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).astimezone()


def make_interval(start_ms: float, end_ms: float) -> Interval:
    return Interval(start=local(start_ms), end=local(end_ms))


def make_window(start_ms: float, end_ms: float) -> DateWindow:
    return DateWindow(start=local(start_ms), end=local(end_ms))
