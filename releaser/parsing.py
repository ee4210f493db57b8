"""Shared parsing helpers for configuration and lookup data normalization."""

from __future__ import annotations

from pathlib import Path


_LOG_LEVEL_NAMES = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def normalize_optional_path(value: object) -> Path | None:
    """Normalize an optional path-like value, returning `None` for blanks."""

    text = normalize_optional_string(value)
    if text is None:
        return None
    return Path(text)


def parse_log_level(value: object, field_name: str) -> str:
    """Parse a loguru level name case-insensitively.

    Args:
        value: Level token to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is blank or not a known level name.
    """

    normalized = normalize_optional_string(value)
    if normalized is not None and normalized.upper() in _LOG_LEVEL_NAMES:
        return normalized.upper()

    levels = ", ".join(sorted(_LOG_LEVEL_NAMES))
    raise ValueError(f"`{field_name}` must be one of: {levels}.")
