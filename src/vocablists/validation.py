"""Word validity capability consumed by the list store, plus a regex-based default."""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable


@runtime_checkable
class WordValidator(Protocol):
    def is_valid_word(self, word: str) -> bool:
        """Return True if word may be used in a practice session."""
        ...


class PatternWordValidator:
    """Accepts words that fully match a regular expression (validation.word_pattern in config)."""

    def __init__(self, pattern: str = "^[a-z]+$") -> None:
        self.pattern = re.compile(pattern)

    def is_valid_word(self, word: str) -> bool:
        return self.pattern.fullmatch(word) is not None


class AcceptAllValidator:
    def is_valid_word(self, word: str) -> bool:
        return True
