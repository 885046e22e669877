"""AggregateResult -- one ranked row: a log file and its total play time."""
from __future__ import annotations

from dataclasses import dataclass

from playlog_analyser.domain.types import FileStem, Seconds


@dataclass(frozen=True, slots=True)
class AggregateResult:
    name: FileStem
    total_seconds: Seconds
