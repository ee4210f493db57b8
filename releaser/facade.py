"""Public releaser operations.

Responsibilities:
- Compose the pre-filter chain, normalizer, slug codec and lookup table.
- Degrade invalid URL paths to empty results instead of raising.

Key types:
- `Releaser`: display names, storage cells and URL paths for releasers.
"""

from __future__ import annotations

import threading
from typing import TextIO

from .config import ReleaserConfig
from .errors import InvalidPathError
from .lookup.table import ReleaserTable, default_table, load_table
from .telemetry.logger import EventLogger
from .text import slug
from .text.cleaners import TextCleaner
from .text.normalizer import Normalizer


LINK_JOINER = " + "


class Releaser:
    """Clean, humanize and obfuscate releaser names against a lookup table."""

    def __init__(
        self,
        table: ReleaserTable | None = None,
        event_logger: EventLogger | None = None,
    ) -> None:
        """Initialize with a lookup table, defaulting to the packaged data."""

        self.table = table if table is not None else default_table()
        self._cleaner = TextCleaner()
        self._normalizer = Normalizer(self.table)
        self._events = event_logger
        if self._events is not None:
            self._events.log_lookup_loaded(
                specials=len(self.table.specials),
                initialisms=len(self.table.initialisms),
            )

    @classmethod
    def from_config(cls, config: ReleaserConfig, sink: TextIO | None = None) -> Releaser:
        """Build a releaser from config, logging events to `sink` when given."""

        config.validate()
        if config.names_path is None and config.initialisms_path is None:
            table = default_table()
        else:
            table = load_table(config.names_path, config.initialisms_path)
        event_logger = EventLogger(sink, level=config.log_level) if sink is not None else None
        return cls(table=table, event_logger=event_logger)

    def clean(self, text: str) -> str:
        """Fix a malformed name for display.

        Duplicate spaces and incompatible characters are removed, and a leading
        "The" is dropped from BBS and FTP site names.

        Example:
            `clean("  Defacto2  demo  group.") == "Defacto2 Demo Group"`
            `clean("the x bbs") == "X BBS"`
        """

        return self._normalizer.format(self._cleaner.clean(text))

    def cell(self, text: str) -> str:
        """Format a name to be used as a cell in a database table.

        Example:
            `cell("  Defacto2  demo  group.") == "DEFACTO2 DEMO GROUP"`
            `cell("defacto2.net") == "DEFACTO2NET"`
        """

        return self._normalizer.cell(self._cleaner.clean(text))

    def humanize(self, path: str) -> str:
        """Return the human-readable name for a URL path.

        Returns an empty string when the path contains invalid characters.

        Example:
            `humanize("razor-1911-demo*trsi") == "Razor 1911 Demo, TRSi"`
            `humanize("razor-1911-demo#trsi") == ""`
        """

        lowered = path.lower()
        special = self.table.special(lowered)
        if special:
            return special
        try:
            decoded = slug.decode(lowered)
        except InvalidPathError:
            self._log_rejected("humanize", path)
            return ""
        return self.clean(decoded)

    def index(self, path: str) -> str:
        """Return the uppercase name for a URL path, used as a stable index key.

        Stylized names are not consulted. Invalid paths return an empty string.

        Example:
            `index("class*paradigm*razor-1911") == "CLASS, PARADIGM, RAZOR 1911"`
        """

        try:
            decoded = slug.decode(path)
        except InvalidPathError:
            self._log_rejected("index", path)
            return ""
        return decoded.upper()

    def link(self, path: str) -> str:
        """Return the humanized name formatted as a link description.

        Example:
            `link("class*paradigm*razor-1911") == "Class + Paradigm + Razor 1911"`
        """

        return self.humanize(path).replace(slug.SPACED_COMMA, LINK_JOINER)

    def obfuscate(self, text: str) -> str:
        """Format a name to be used as a URL path.

        Listed stylized names and initialisms resolve to their own slug; when a
        display string is listed under several slugs the smallest slug wins.

        Example:
            `obfuscate("ACiD Productions") == "acid-productions"`
            `obfuscate("Razor 1911 Demo & Skillion") == "razor-1911-demo-ampersand-skillion"`
            `obfuscate("TDT") == "the-dream-team"`
        """

        stripped = text.strip()
        known = (
            self.table.slug_for_special(stripped)
            or self.table.slug_for_initialism(stripped)
        )
        if known:
            return known
        if self.table.special(stripped):
            return stripped.lower()
        cleaned = self.clean(text)
        return self.table.slug_for_special(cleaned) or slug.encode(cleaned)

    def title(self, text: str) -> str:
        """Return the display name for free text, resolving stylized names.

        Example:
            `title("tdt / trsi") == "TDT / TRSi"`
            `title("nappa") == "North American Pirate-Phreak Association"`
        """

        return self.humanize(self.obfuscate(text))

    def is_valid(self, path: str) -> bool:
        """Return whether the URL path only uses slug characters."""

        return slug.is_valid(path)

    def special(self, path: str) -> str:
        """Return the stylized name of a listed releaser, or an empty string."""

        return self.table.special(path) or ""

    def initialism(self, path: str) -> tuple[str, ...]:
        """Return the alternate spellings, acronyms and initialisms for a URL path."""

        return self.table.initialism(path)

    def is_initialism(self, path: str) -> bool:
        """Return whether the URL path has listed initialisms."""

        return self.table.is_initialism(path)

    def join_initialisms(self, path: str) -> str:
        """Return the initialisms for a URL path as a comma separated string.

        Example:
            `join_initialisms("the-firm") == "FiRM, FRM"`
        """

        return self.table.join_initialisms(path)

    def close(self) -> None:
        """Detach the event logger sink, if any."""

        if self._events is not None:
            self._events.close()
            self._events = None

    def _log_rejected(self, operation: str, path: str) -> None:
        """Report a URL path that failed slug validation."""

        if self._events is not None:
            self._events.log_decode_rejected(operation, path)


_DEFAULT_RELEASER: Releaser | None = None
_DEFAULT_RELEASER_LOCK = threading.Lock()


def default_releaser() -> Releaser:
    """Return the process-wide releaser built on the packaged lookup data."""

    global _DEFAULT_RELEASER
    if _DEFAULT_RELEASER is None:
        with _DEFAULT_RELEASER_LOCK:
            if _DEFAULT_RELEASER is None:
                _DEFAULT_RELEASER = Releaser()
    return _DEFAULT_RELEASER


def clean(text: str) -> str:
    """Fix a malformed name for display using the packaged lookup data."""

    return default_releaser().clean(text)


def cell(text: str) -> str:
    """Format a name as an uppercase database table cell."""

    return default_releaser().cell(text)


def humanize(path: str) -> str:
    """Return the human-readable name for a URL path, or an empty string."""

    return default_releaser().humanize(path)


def index(path: str) -> str:
    """Return the uppercase index key for a URL path, or an empty string."""

    return default_releaser().index(path)


def link(path: str) -> str:
    """Return the humanized name of a URL path as a link description."""

    return default_releaser().link(path)


def obfuscate(text: str) -> str:
    """Format a name to be used as a URL path."""

    return default_releaser().obfuscate(text)


def title(text: str) -> str:
    """Return the display name for free text, resolving stylized names."""

    return default_releaser().title(text)


def is_valid(path: str) -> bool:
    """Return whether the URL path only uses slug characters."""

    return slug.is_valid(path)
