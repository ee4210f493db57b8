"""Read-only lookup tables of stylized releaser names and initialisms.

Responsibilities:
- Hold special display names and initialism alternates keyed by slug.
- Resolve display strings back to slugs with a deterministic tie-break.
- Load and validate the YAML data sets, packaged or user supplied.

Key types:
- `ReleaserTable`: immutable special-name and initialism maps.
- `load_table`: build a table from YAML files.
- `default_table`: process-wide table built once from the packaged data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
import threading
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import yaml

from ..errors import LookupTableError
from ..parsing import normalize_optional_string
from ..text.slug import decode, is_valid


_NAMES_RESOURCE = "names.yaml"
_INITIALISMS_RESOURCE = "initialisms.yaml"
_NAMES_SECTIONS = frozenset({"names", "lowercase", "uppercase"})

_DEFAULT_TABLE: ReleaserTable | None = None
_DEFAULT_TABLE_LOCK = threading.Lock()


def _reverse_index(pairs: Iterable[tuple[str, str]]) -> Mapping[str, str]:
    """Map casefolded display strings to the smallest slug that carries them."""

    index: dict[str, str] = {}
    for slug, display in pairs:
        key = display.casefold()
        current = index.get(key)
        if current is None or slug < current:
            index[key] = slug
    return MappingProxyType(index)


@dataclass(frozen=True, slots=True)
class ReleaserTable:
    """Immutable lookup maps consulted by the normalizer and facade.

    Attributes:
        specials: Slug to canonical stylized display name.
        initialisms: Slug to alternate spellings, acronyms and initialisms.
    """

    specials: Mapping[str, str]
    initialisms: Mapping[str, tuple[str, ...]]
    _special_slugs: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _initialism_slugs: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the maps and build the reverse display-to-slug indexes."""

        specials = MappingProxyType(dict(self.specials))
        initialisms = MappingProxyType(
            {slug: tuple(values) for slug, values in self.initialisms.items()}
        )
        object.__setattr__(self, "specials", specials)
        object.__setattr__(self, "initialisms", initialisms)
        object.__setattr__(self, "_special_slugs", _reverse_index(specials.items()))
        object.__setattr__(
            self,
            "_initialism_slugs",
            _reverse_index(
                (slug, value) for slug, values in initialisms.items() for value in values
            ),
        )

    @classmethod
    def from_mappings(
        cls,
        names: Mapping[str, str] | None = None,
        lowercase: Iterable[str] = (),
        uppercase: Iterable[str] = (),
        initialisms: Mapping[str, Iterable[str]] | None = None,
        source: str = "mappings",
    ) -> ReleaserTable:
        """Build a validated table from plain mappings.

        Lowercase and uppercase entries are slugs whose display form is the decoded
        slug in that casing. Later sections win: names, then lowercase, then uppercase.

        Raises:
            LookupTableError: If a key is not a valid slug or a value is blank.
        """

        specials: dict[str, str] = {}
        for slug, display in (names or {}).items():
            _require_slug(slug, source)
            specials[slug] = _require_display(slug, display, source)
        for slug in lowercase:
            _require_slug(slug, source)
            specials[slug] = decode(slug).lower()
        for slug in uppercase:
            _require_slug(slug, source)
            specials[slug] = decode(slug).upper()

        alternates: dict[str, tuple[str, ...]] = {}
        for slug, values in (initialisms or {}).items():
            _require_slug(slug, source)
            if not isinstance(values, (list, tuple)):
                raise LookupTableError(
                    source=source,
                    detail=f"Initialisms for `{slug}` must be a list of names.",
                    hint="Wrap single initialisms in a YAML list, e.g. `[DF2]`.",
                )
            alternates[slug] = tuple(
                _require_display(slug, value, source) for value in values
            )
        return cls(specials=specials, initialisms=alternates)

    def special(self, slug: str) -> str | None:
        """Return the stylized name of a listed releaser, or `None` when unlisted.

        Example:
            `table.special("acid-productions") == "ACiD Productions"`
        """

        return self.specials.get(slug.lower())

    def initialism(self, slug: str) -> tuple[str, ...]:
        """Return the alternates for a releaser, or an empty tuple."""

        return self.initialisms.get(slug, ())

    def is_initialism(self, slug: str) -> bool:
        """Return whether the releaser has listed alternates."""

        return slug in self.initialisms

    def join_initialisms(self, slug: str) -> str:
        """Return the alternates for a releaser as a comma separated string."""

        return ", ".join(self.initialism(slug))

    def slug_for_special(self, display: str) -> str | None:
        """Return the slug whose special name equals `display`, ignoring case."""

        return self._special_slugs.get(display.casefold())

    def slug_for_initialism(self, alternate: str) -> str | None:
        """Return the smallest slug listing `alternate` as an initialism, ignoring case."""

        return self._initialism_slugs.get(alternate.casefold())


def _require_slug(slug: object, source: str) -> None:
    """Reject keys that could never appear in a releaser URL path."""

    if not isinstance(slug, str) or not is_valid(slug):
        raise LookupTableError(
            source=source,
            detail=f"Invalid releaser slug key `{slug}`.",
            hint="Slug keys may only use lowercase a-z, 0-9, `&`, `-`, `_` and `*`.",
        )


def _require_display(slug: str, value: object, source: str) -> str:
    """Return a non-blank display value for `slug`."""

    if not isinstance(value, str) or normalize_optional_string(value) is None:
        raise LookupTableError(
            source=source,
            detail=f"Empty display name for `{slug}`.",
        )
    return value


def _read_yaml(path: Path | None, resource: str) -> tuple[Any, str]:
    """Read a YAML document from `path`, or from the packaged data when unset."""

    if path is None:
        source = f"package:{resource}"
        raw_text = (
            resources.files("releaser.lookup").joinpath("data").joinpath(resource).read_text(
                encoding="utf-8"
            )
        )
    else:
        source = str(path)
        try:
            raw_text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise LookupTableError(
                source=source,
                detail=f"Lookup data file not found: `{path}`.",
                hint="Point the config at an existing YAML file.",
            ) from exc

    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise LookupTableError(
            source=source,
            detail=f"Invalid YAML in `{source}`: {exc}",
            hint="Quote keys and names that contain YAML syntax characters.",
        ) from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise LookupTableError(
            source=source,
            detail=f"Lookup data `{source}` must contain a top-level mapping.",
        )
    return payload, source


def load_table(
    names_path: Path | None = None,
    initialisms_path: Path | None = None,
) -> ReleaserTable:
    """Load special names and initialisms from YAML, defaulting to packaged data.

    The names document holds up to three sections: `names` (slug to stylized
    name), `lowercase` and `uppercase` (lists of slugs).

    Raises:
        LookupTableError: If a file is missing, malformed or holds invalid entries.
    """

    names_payload, names_source = _read_yaml(names_path, _NAMES_RESOURCE)
    unknown = sorted(set(names_payload).difference(_NAMES_SECTIONS))
    if unknown:
        raise LookupTableError(
            source=names_source,
            detail=f"{names_source} includes unsupported section(s): {', '.join(map(str, unknown))}.",
            hint="Use only `names`, `lowercase` and `uppercase` sections.",
        )
    names = names_payload.get("names") or {}
    lowercase = names_payload.get("lowercase") or []
    uppercase = names_payload.get("uppercase") or []
    if not isinstance(names, Mapping):
        raise LookupTableError(
            source=names_source,
            detail=f"`names` in {names_source} must be a mapping.",
        )
    if not isinstance(lowercase, list) or not isinstance(uppercase, list):
        raise LookupTableError(
            source=names_source,
            detail=f"`lowercase` and `uppercase` in {names_source} must be lists.",
        )

    initialisms_payload, initialisms_source = _read_yaml(
        initialisms_path, _INITIALISMS_RESOURCE
    )
    special_table = ReleaserTable.from_mappings(
        names=names,
        lowercase=lowercase,
        uppercase=uppercase,
        source=names_source,
    )
    initialism_table = ReleaserTable.from_mappings(
        initialisms=initialisms_payload,
        source=initialisms_source,
    )
    return ReleaserTable(
        specials=special_table.specials,
        initialisms=initialism_table.initialisms,
    )


def default_table() -> ReleaserTable:
    """Return the process-wide table built once from the packaged data."""

    global _DEFAULT_TABLE
    if _DEFAULT_TABLE is None:
        with _DEFAULT_TABLE_LOCK:
            if _DEFAULT_TABLE is None:
                _DEFAULT_TABLE = load_table()
    return _DEFAULT_TABLE
