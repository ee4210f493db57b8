"""Configuration model and loaders for releaser.

Responsibilities:
- Define lookup data and logging settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ReleaserConfig`: normalized settings for building a `Releaser`.
- `ConfigLoader`: static construction helpers for `ReleaserConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_path, normalize_optional_string, parse_log_level


_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class ReleaserConfig:
    """Settings used to build a releaser facade.

    Attributes:
        names_path: Optional YAML file replacing the packaged stylized names.
        initialisms_path: Optional YAML file replacing the packaged initialisms.
        log_level: Minimum loguru level for emitted events.
    """

    names_path: Path | None = None
    initialisms_path: Path | None = None
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before the lookup data is loaded."""

        parse_log_level(self.log_level, "log_level")


class ConfigLoader:
    """Construction helpers for `ReleaserConfig`."""

    _SUPPORTED_YAML_KEYS = frozenset({"names_path", "initialisms_path", "log_level"})

    @staticmethod
    def from_yaml(path: Path) -> ReleaserConfig:
        """Load configuration from a YAML mapping.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the payload has unsupported keys or invalid values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ReleaserConfig:
        """Load configuration from `RELEASER_*` environment variables."""

        env_map = os.environ if env is None else env
        log_level = normalize_optional_string(env_map.get("RELEASER_LOG_LEVEL"))
        config = ReleaserConfig(
            names_path=normalize_optional_path(env_map.get("RELEASER_NAMES_PATH")),
            initialisms_path=normalize_optional_path(
                env_map.get("RELEASER_INITIALISMS_PATH")
            ),
            log_level=(
                parse_log_level(log_level, "RELEASER_LOG_LEVEL")
                if log_level is not None
                else _DEFAULT_LOG_LEVEL
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ReleaserConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            (str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        for key in sorted(ConfigLoader._SUPPORTED_YAML_KEYS):
            if key in payload and normalize_optional_string(payload[key]) is None:
                raise ValueError(f"{source_label} has blank `{key}`; remove it or set a value.")

        log_level = payload.get("log_level", _DEFAULT_LOG_LEVEL)
        config = ReleaserConfig(
            names_path=normalize_optional_path(payload.get("names_path")),
            initialisms_path=normalize_optional_path(payload.get("initialisms_path")),
            log_level=parse_log_level(log_level, "log_level"),
        )
        config.validate()
        return config
