"""Domain exceptions for slug decoding and lookup data diagnostics."""

from __future__ import annotations


class InvalidPathError(ValueError):
    """Raised when a releaser URL path contains characters outside the slug set."""

    def __init__(self, path: str) -> None:
        """Initialize an invalid-path error for the rejected slug."""

        super().__init__("the path contains invalid characters")
        self.path = path


class LookupTableError(ValueError):
    """Raised when special-name or initialism data cannot be used."""

    def __init__(
        self,
        *,
        source: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a source-scoped lookup data error."""

        super().__init__(detail)
        self.source = source
        self.detail = detail
        self.hint = hint
