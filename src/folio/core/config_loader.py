from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from folio.core.config import FolioConfig
from folio.core.exceptions import ConfigError


def _deep_merge(destination: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(destination.get(key), Mapping):
            destination[key] = _deep_merge(dict(destination[key]), value)
        else:
            destination[key] = value
    return destination


class ConfigLoader:
    """Loads Folio configuration from ``.folio/config.yml`` and the environment.

    Priority (highest to lowest):
    1. Environment variables (FOLIO_SECTION__KEY)
    2. Config file (.folio/config.yml relative to site_root)
    3. Defaults
    """

    def __init__(self, site_root: Path | None = None):
        self.site_root = site_root if site_root is not None else Path.cwd()

    @property
    def config_path(self) -> Path:
        return self.site_root / ".folio" / "config.yml"

    def load(self) -> FolioConfig:
        # Only values actually read from the environment count as set
        env_settings = FolioConfig().model_dump(exclude_unset=True)
        merged = _deep_merge(self._load_from_file(), env_settings)

        try:
            return FolioConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(str(self.config_path), f"invalid settings: {e}") from e

    def _load_from_file(self) -> dict[str, Any]:
        config_path = self.config_path
        if not config_path.exists():
            return {}

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(config_path), f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(
                str(config_path),
                f"configuration root must be a mapping, got {type(data).__name__}",
            )
        return data
