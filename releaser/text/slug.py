"""Reversible URL path slugs for releaser names.

Responsibilities:
- Encode display names into lowercase URL-safe slugs.
- Decode slugs back into lowercase, spaced names.
- Validate the slug character set.

The substitution tables are applied strictly in order: literal hyphens are
protected as underscores before spaces become hyphens, and the ampersand
marker must be decoded before bare hyphens turn into spaces.
"""

from __future__ import annotations

import re

from ..errors import InvalidPathError


SPACED_AMPERSAND = " & "
SPACED_COMMA = ", "
AMPERSAND_MARKER = "-ampersand-"

_VALID_SLUG_RE = re.compile(r"[a-z0-9&\-_*]+")
_UNENCODABLE_RE = re.compile(r"[^a-z0-9&\-, ]")

ENCODE_STEPS: tuple[tuple[str, str], ...] = (
    ("-", "_"),
    (SPACED_AMPERSAND, AMPERSAND_MARKER),
    (SPACED_COMMA, "*"),
    (" ", "-"),
    (",", ""),
)
DECODE_STEPS: tuple[tuple[str, str], ...] = (
    (AMPERSAND_MARKER, SPACED_AMPERSAND),
    ("-", " "),
    ("_", "-"),
    ("*", SPACED_COMMA),
)


def _substitute(text: str, steps: tuple[tuple[str, str], ...]) -> str:
    """Apply literal replacements in sequence."""

    for old, new in steps:
        text = text.replace(old, new)
    return text


def is_valid(slug: str) -> bool:
    """Return whether the slug only uses lowercase slug characters.

    Example:
        `is_valid("acid-productions") is True`
        `is_valid("acid-productions!") is False`
    """

    return _VALID_SLUG_RE.fullmatch(slug) is not None


def encode(display: str) -> str:
    """Format a display name to be used as a URL path.

    Example:
        `encode("ACiD Productions") == "acid-productions"`
        `encode("Razor 1911 Demo & Skillion") == "razor-1911-demo-ampersand-skillion"`
        `encode("TDU-Jam!") == "tdu_jam"`
    """

    text = _UNENCODABLE_RE.sub("", display.lower().strip())
    return _substitute(text, ENCODE_STEPS)


def decode(slug: str) -> str:
    """Return the lowercase, spaced name described by a URL path.

    Raises:
        InvalidPathError: If the slug contains characters outside the slug set.
    """

    if not is_valid(slug):
        raise InvalidPathError(slug)
    return _substitute(slug.lower(), DECODE_STEPS)
