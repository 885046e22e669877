"""Serialized writer for user-facing diagnostic lines.

File tasks run on a thread pool and may all hit bad lines at once.
Each emit() holds the lock for one write+flush, so lines interleave
between tasks but never tear.
"""
from __future__ import annotations

import sys
import threading
from typing import TextIO


class DiagnosticSink:
    """Thread-safe line writer for the diagnostic stream.

    Args:
        stream: Where lines go. None means sys.stderr, looked up on
            every write so pytest's capture (and redirection) still works.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._emitted = 0

    def emit(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        with self._lock:
            stream.write(line + "\n")
            stream.flush()
            self._emitted += 1

    @property
    def emitted(self) -> int:
        """Number of lines written so far (thread-safe read)."""
        with self._lock:
            return self._emitted
