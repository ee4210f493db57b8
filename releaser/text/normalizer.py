"""Releaser name normalization.

Responsibilities:
- Split multi-group names on commas and format each group word by word.
- Substitute known stylized names before falling back to casing rules.
- Produce uppercase storage keys that ignore the stylized-name table.

Key types:
- `Normalizer`: formats display names and storage cells.
- `amp`: normalize ampersand spacing.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .classifier import classify, hyphen
from .cleaners import trim_the, trim_trailing_dot
from .slug import encode

if TYPE_CHECKING:
    from ..lookup.table import ReleaserTable


ACRONYM_LENGTH = 3
GROUP_SEPARATOR = ","
GROUP_JOINER = ", "
SPACE = " "

_AMPERSAND_RE = re.compile(r"\s*&[\s&]*")
_AMPERSAND_EDGE_RE = re.compile(r"^[\s&]+|[\s&]+$")


def amp(text: str) -> str:
    """Format the ampersand characters so they are usable in a URL path.

    Runs of ampersands collapse to one, leading and trailing ampersands are
    dropped, and every remaining ampersand gets one space on each side.

    Example:
        `amp("hello&&world") == "hello & world"`
        `amp("a&b &c") == "a & b & c"`
    """

    if "&" not in text:
        return text
    text = _AMPERSAND_RE.sub(" & ", text)
    return _AMPERSAND_EDGE_RE.sub("", text)


def split_groups(text: str) -> list[str]:
    """Split comma separated text into lowercase groups, dropping empty ones."""

    groups = (amp(group.strip().lower()) for group in text.split(GROUP_SEPARATOR))
    return [group for group in groups if group]


def format_words(group: str) -> str:
    """Apply the per-word casing rules to a lowercase, space separated group."""

    words = group.split(SPACE)
    last_index = len(words) - 1
    formatted: list[str] = []
    for index, word in enumerate(words):
        word = trim_trailing_dot(word)
        formatted.append(hyphen(word) or classify(word, index, last_index))
    return SPACE.join(formatted)


class Normalizer:
    """Format free-text releaser names into display names and storage cells."""

    def __init__(self, table: ReleaserTable | None = None) -> None:
        """Initialize with an optional table of stylized names."""

        self._table = table

    def format(self, text: str) -> str:
        """Return a copy of the text with releaser name casing.

        Known acronyms are uppercased, connecting words lowercased and other words
        title cased. Groups listed in the stylized-name table keep their exact form.

        Example:
            `Normalizer().format("hello world.") == "Hello World"`
            `Normalizer().format("the 12am group.") == "The 12AM Group"`
        """

        if len(text) <= ACRONYM_LENGTH:
            return text.upper()
        groups = [self._format_group(group) for group in split_groups(text)]
        return GROUP_JOINER.join(groups)

    def cell(self, text: str) -> str:
        """Return the uppercase form of the text used as a database table cell.

        The stylized-name table is not consulted, so the cell is derived from the
        text alone.

        Example:
            `Normalizer().cell("the x bbs") == "X BBS"`
        """

        if len(text) <= ACRONYM_LENGTH:
            return text.upper()
        text = trim_the(text)
        groups = [format_words(group) for group in split_groups(text)]
        return GROUP_JOINER.join(groups).upper()

    def _format_group(self, group: str) -> str:
        """Format one lowercase group, preferring its stylized name."""

        if self._table is not None:
            special = self._table.special(encode(group))
            if special:
                return special
        return format_words(group)
