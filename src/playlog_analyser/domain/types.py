"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import TypeAlias

FileStem: TypeAlias = str
Seconds: TypeAlias = float
Millis: TypeAlias = float  # Unix epoch milliseconds
