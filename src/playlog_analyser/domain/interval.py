"""Interval and DateWindow -- the two time spans the pipeline works with.

An Interval is one playback segment read from a log line. A DateWindow
is the caller's filter. Both hold timezone-aware local datetimes so
subtraction stays correct across DST changes.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from playlog_analyser.domain.types import Seconds


@dataclass(frozen=True, slots=True)
class Interval:
    """Closed playback segment [start, end]. Immutable once parsed."""
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def duration_seconds(self) -> Seconds:
        """Length of the segment in (fractional) seconds."""
        return (self.end - self.start).total_seconds()


@dataclass(frozen=True, slots=True)
class DateWindow:
    """Caller-supplied filter range.

    The lower bound is checked against the interval's start and the
    upper bound against the interval's end:

        window.start <= interval.start  and  interval.end <= window.end

    A window with start > end is allowed; it admits nothing.
    """
    start: datetime
    end: datetime

    def admits(self, interval: Interval) -> bool:
        return interval.start >= self.start and interval.end <= self.end

    @classmethod
    def all_time(cls) -> DateWindow:
        """Factory: [Unix epoch, now], both in local time."""
        epoch = datetime.fromtimestamp(0, tz=timezone.utc).astimezone()
        return cls(start=epoch, end=datetime.now().astimezone())
