"""
Configuration Loader - Gate Settings From YAML.

A gate config file may be overlaid by a named profile. Profiles live in a
``profiles/`` directory next to the config file unless a directory is
given explicitly:

    deploy/
        gate.yaml
        profiles/
            production.yaml     # only the keys that differ

    config = load_config("deploy/gate.yaml", profile="production")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from killrvideo_validation.config.models import GateConfig

logger = logging.getLogger(__name__)

PROFILES_DIRNAME = "profiles"


def read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """
    Read a YAML file whose top level is a mapping.

    An empty file reads as an empty mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a mapping
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: expected a mapping at top level, got {type(data).__name__}"
        )
    return data


def overlay(base: Dict[str, Any], profile: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``profile`` values applied, section by section."""
    merged = dict(base)
    for key, value in profile.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = overlay(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads a GateConfig from a YAML file and an optional profile."""

    def __init__(self, profiles_dir: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            profiles_dir: Directory holding ``<profile>.yaml`` files.
                Defaults to ``profiles/`` beside each loaded config file.
        """
        self._profiles_dir = profiles_dir

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> GateConfig:
        """
        Load and validate a gate configuration.

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            ValueError: If a file is not a YAML mapping
            pydantic.ValidationError: If a value is invalid
        """
        path = Path(config_path)
        settings = read_yaml_mapping(path)

        if profile:
            profile_path = self.profile_path(path, profile)
            settings = overlay(settings, read_yaml_mapping(profile_path))
            logger.info(f"Applied config profile '{profile}' from {profile_path}")

        return GateConfig.model_validate(settings)

    def profile_path(self, config_path: Path, profile: str) -> Path:
        """
        Locate the file of a named profile.

        Raises:
            FileNotFoundError: If the profile file doesn't exist
        """
        directory = self._profiles_dir
        if directory is None:
            directory = config_path.parent / PROFILES_DIRNAME
        path = directory / f"{profile}.yaml"
        if not path.is_file():
            raise FileNotFoundError(f"Profile not found: {profile} (looked in {directory})")
        return path


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    profiles_dir: Optional[Path] = None,
) -> GateConfig:
    """Load a gate configuration, applying ``profile`` when given."""
    return ConfigLoader(profiles_dir=profiles_dir).load(config_path, profile)
