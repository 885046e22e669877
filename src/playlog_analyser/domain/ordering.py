"""Sort keys the ranker understands."""
from __future__ import annotations

from enum import Enum, auto


class SortOrder(Enum):
    NAME = auto()
    DURATION = auto()

    @classmethod
    def parse(cls, text: str) -> SortOrder:
        """Accept the CLI spellings ("Name", "duration", ...)."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            choices = ", ".join(m.name.capitalize() for m in cls)
            raise ValueError(
                f"invalid sort order {text!r} (expected one of: {choices})"
            ) from None

    def __str__(self) -> str:
        return self.name.capitalize()
