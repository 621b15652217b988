"""
Configuration Loader - Layered YAML Configuration.

An ExplorerConfig is built from up to two YAML layers applied over the
model defaults:

    1. the base file passed on the command line (optional)
    2. a named profile from ``config/profiles/<name>.yaml`` (optional)

Sections are merged key by key, so a profile only has to name the
settings it changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from fund_explorer.config.models import ExplorerConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path("config") / "profiles"


def merge_sections(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``overlay`` merged in, nested mappings key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_sections(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Builds ExplorerConfig from a base file and an optional profile."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths and the
                profiles directory are resolved against
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> ExplorerConfig:
        """
        Load configuration layers and validate the result.

        Args:
            config_path: Base YAML file; model defaults when omitted
            profile: Profile name merged over the base layer

        Returns:
            Validated ExplorerConfig object

        Raises:
            FileNotFoundError: If the config file or profile doesn't exist
            ValidationError: If the merged settings are invalid
        """
        settings: Dict[str, Any] = {}
        if config_path is not None:
            settings = self._read_layer(self._resolve(Path(config_path)))
        if profile:
            profile_path = self._resolve(PROFILES_DIR / f"{profile}.yaml")
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile}")
            settings = merge_sections(settings, self._read_layer(profile_path))

        logger.debug(
            f"Config layers: file={config_path or '-'} profile={profile or '-'}"
        )
        return ExplorerConfig.model_validate(settings)

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self._base_path / path

    @staticmethod
    def _read_layer(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ExplorerConfig:
    """Load configuration; see ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
