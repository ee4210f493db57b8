"""Text filtering, casing and slug components.

This package provides the deterministic building blocks behind the public
releaser operations: character filters, per-word casing rules, the slug codec
and the name normalizer.
"""

from .cleaners import (
    CollapseSpaces,
    StripChars,
    StripLeading,
    StripSurroundingSpace,
    TextCleaner,
    TrimThePrefix,
)
from .normalizer import Normalizer

__all__ = [
    "TextCleaner",
    "Normalizer",
    "StripChars",
    "CollapseSpaces",
    "StripLeading",
    "StripSurroundingSpace",
    "TrimThePrefix",
]
