"""Deterministic character filtering rules for releaser names.

Responsibilities:
- Strip characters that cannot appear in group, BBS or FTP site names.
- Provide composable cleanup rules applied before casing decisions.
- Keep preprocessing predictable so equal inputs always clean to equal keys.
"""

from __future__ import annotations

import re
from typing import Protocol, Sequence


_INCOMPATIBLE_RE = re.compile(r"[^A-Za-zÀ-ÖØ-öø-ÿ0-9\-,& ]")
_LATIN_RE = re.compile(r"[A-Za-z0-9À-ÖØ-öø-ÿ]")
_WHITESPACE_RE = re.compile(r"\s+")
_SITE_SUFFIXES = frozenset({"BBS", "FTP"})


def strip_chars(text: str) -> str:
    """Remove every character that cannot be used in a releaser name.

    Example:
        `strip_chars("Café!") == "Café"`
        `strip_chars(".~[[@]hello[@]]~.") == "hello"`
    """

    return _INCOMPATIBLE_RE.sub("", text)


def strip_leading(text: str) -> str:
    """Remove the non-alphanumeric characters from the start of the text.

    Returns an empty string when the text has no Latin letter or digit.
    """

    match = _LATIN_RE.search(text)
    if match is None:
        return ""
    return text[match.start():]


def collapse_spaces(text: str) -> str:
    """Replace every run of whitespace with a single space."""

    return _WHITESPACE_RE.sub(" ", text)


def trim_trailing_dot(text: str) -> str:
    """Remove a single trailing dot, so `"hello.."` becomes `"hello."`."""

    if len(text) < 2:
        return text
    if text.endswith("."):
        return text[:-1]
    return text


def trim_the(name: str) -> str:
    """Drop a leading "The" from BBS and FTP site names.

    This avoids the same site being catalogued as both "The X BBS" and "X BBS".
    """

    tokens = name.split(" ")
    if len(tokens) < 2:
        return name
    if tokens[0].lower() == "the" and tokens[-1].upper() in _SITE_SUFFIXES:
        return " ".join(tokens[1:]).strip()
    return name


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class StripChars:
    """Remove characters outside the releaser name character set."""

    def apply(self, text: str) -> str:
        """Apply incompatible-character cleanup rule."""

        return strip_chars(text)


class CollapseSpaces:
    """Normalize whitespace runs to single spaces."""

    def apply(self, text: str) -> str:
        """Apply whitespace collapsing rule."""

        return collapse_spaces(text)


class StripLeading:
    """Remove leading punctuation and symbols."""

    def apply(self, text: str) -> str:
        """Apply leading-junk cleanup rule."""

        return strip_leading(text)


class StripSurroundingSpace:
    """Trim spaces at both ends."""

    def apply(self, text: str) -> str:
        """Apply surrounding-space trim rule."""

        return text.strip()


class TrimThePrefix:
    """Drop the "The" prefix of BBS and FTP site names."""

    def apply(self, text: str) -> str:
        """Apply site-name prefix rule."""

        return trim_the(text)


class TextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: Sequence[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or the releaser pre-filter sequence.

        Characters are stripped before whitespace is collapsed so that a removed
        symbol between two spaces does not leave a double space behind.
        """

        self.rules = list(rules) if rules else [
            StripChars(),
            CollapseSpaces(),
            StripLeading(),
            StripSurroundingSpace(),
            TrimThePrefix(),
        ]

    def clean(self, text: str) -> str:
        """Run all configured rules in order."""

        cleaned = text
        for rule in self.rules:
            cleaned = rule.apply(cleaned)
        return cleaned
