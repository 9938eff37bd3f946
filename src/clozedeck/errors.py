"""Error types raised while reading flashcard sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Entries


class EntriesParseError(ValueError):
    """Structural failure at one line of the fixed-format source."""

    def __init__(self, line: int, data: str, reason: str, entries: Entries | None = None) -> None:
        super().__init__(reason)
        self.line = line
        self.data = data
        self.reason = reason
        self.entries = entries


class EntriesReadError(OSError):
    """The line source failed while it was being read."""


class TagBalanceError(ValueError):
    """Unbalanced or malformed tags in a text field."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
