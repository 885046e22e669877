"""Log line parsing and lazy file reading."""

from playlog_analyser.parsing.file_reader import read_file
from playlog_analyser.parsing.line_parser import (
    BAD_TIME_RECORDS,
    SPLIT_FAILED,
    Fatal,
    Item,
    LineOutcome,
    Skip,
    millis_to_local,
    parse_line,
)

__all__ = [
    "BAD_TIME_RECORDS",
    "SPLIT_FAILED",
    "Fatal",
    "Item",
    "LineOutcome",
    "Skip",
    "millis_to_local",
    "parse_line",
    "read_file",
]
