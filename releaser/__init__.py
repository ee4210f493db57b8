"""Top-level package for releaser.

This package cleans and formats the names of scene groups, BBS and FTP sites
("releasers") and converts them to and from URL path slugs. The main entry
point is `Releaser`; the module-level functions use the packaged lookup data.
"""

from .errors import InvalidPathError, LookupTableError
from .facade import (
    Releaser,
    cell,
    clean,
    default_releaser,
    humanize,
    index,
    is_valid,
    link,
    obfuscate,
    title,
)

__all__ = [
    "InvalidPathError",
    "LookupTableError",
    "Releaser",
    "cell",
    "clean",
    "default_releaser",
    "humanize",
    "index",
    "is_valid",
    "link",
    "obfuscate",
    "title",
    "__version__",
]

__version__ = "0.1.0"
