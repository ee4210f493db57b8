"""Structured event logging utilities.

Responsibilities:
- Emit concise, deterministic event lines for lookup loading and degraded results.
- Route lines through `loguru` to a caller-supplied sink.
"""

from __future__ import annotations

import threading
from typing import TextIO

from loguru import logger as _loguru_logger


_COMPONENT = "releaser"
_SAFE_CHARACTERS = frozenset({"-", "_", ".", ":", "/", "*", "&"})

_HANDLER_LOCK = threading.Lock()
_ACTIVE_HANDLER_ID: int | None = None


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in _SAFE_CHARACTERS else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def _is_releaser_record(record: dict) -> bool:
    """Accept only records bound to the releaser component."""

    return record["extra"].get("component") == _COMPONENT


class EventLogger:
    """Emit deterministic event lines for observable releaser activity."""

    def __init__(self, sink: TextIO, level: str = "INFO") -> None:
        """Route loguru output to `sink` only, replacing any previous handlers.

        The newest logger owns the output; closing an older one is a no-op.
        """

        global _ACTIVE_HANDLER_ID
        self._logger = _loguru_logger.bind(component=_COMPONENT)
        with _HANDLER_LOCK:
            _loguru_logger.remove()
            self._handler_id = _loguru_logger.add(
                sink,
                format="{message}",
                level=level,
                colorize=False,
                filter=_is_releaser_record,
            )
            _ACTIVE_HANDLER_ID = self._handler_id

    def _emit(self, level: str, event: str, source: str, **context: object) -> None:
        """Emit one structured log line unless a newer logger took over the output."""

        if _ACTIVE_HANDLER_ID != self._handler_id:
            return
        line = (
            f"[releaser] level={level} source={source} event={event}"
            f"{_format_context(context)}"
        )
        self._logger.log(level, line)

    def log_lookup_loaded(self, specials: int, initialisms: int) -> None:
        """Emit a lookup-table load event with entry counts."""

        self._emit("INFO", "lookup_loaded", "lookup", specials=specials, initialisms=initialisms)

    def log_decode_rejected(self, operation: str, path: str) -> None:
        """Emit a debug event for a URL path that failed slug validation."""

        self._emit("DEBUG", "decode_rejected", operation, path=path)

    def close(self) -> None:
        """Detach the handler added for this logger if it is still active."""

        global _ACTIVE_HANDLER_ID
        with _HANDLER_LOCK:
            if _ACTIVE_HANDLER_ID == self._handler_id:
                _loguru_logger.remove(self._handler_id)
                _ACTIVE_HANDLER_ID = None
