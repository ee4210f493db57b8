"""Core datatypes shared across releaser modules.

Responsibilities:
- Represent immutable positional context for per-word casing decisions.

Key types:
- `WordPosition`
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WordPosition:
    """A word and its place within a space or hyphen separated word list.

    Attributes:
        word: The word being classified.
        index: 0-based position of the word in its list.
        last_index: Index of the final word in the same list.
    """

    word: str
    index: int
    last_index: int

    @property
    def is_first(self) -> bool:
        """Return whether the word opens its list."""

        return self.index == 0

    @property
    def is_last(self) -> bool:
        """Return whether the word closes its list."""

        return self.index == self.last_index

    @property
    def is_inner(self) -> bool:
        """Return whether the word is neither first nor last."""

        return not self.is_first and not self.is_last
