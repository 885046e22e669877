"""Shared fixtures: log directories on disk and a captured diagnostic sink."""
from __future__ import annotations

import io
from pathlib import Path

import pytest

from playlog_analyser.diagnostics import DiagnosticSink


@pytest.fixture()
def log_dir(tmp_path: Path) -> Path:
    d = tmp_path / "logs"
    d.mkdir()
    return d


@pytest.fixture()
def write_log(log_dir: Path):
    """Factory: write_log("name.dat", "0 1000", "1000 2000") -> Path."""

    def _write(filename: str, *lines: str) -> Path:
        path = log_dir / filename
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def err_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def sink(err_stream: io.StringIO) -> DiagnosticSink:
    return DiagnosticSink(err_stream)
