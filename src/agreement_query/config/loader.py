"""
Configuration Loader.

Reads a YAML file into a QueryConfig. A named profile is an overlay file in
a ``profiles/`` directory next to the base file:

    query.yaml
    profiles/
        strict.yaml     # load("query.yaml", profile="strict")

Overlay sections are merged key by key into the base file before pydantic
validates the result.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from agreement_query.config.models import QueryConfig

PathLike = Union[str, Path]


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def _overlay(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads QueryConfig objects from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths start from
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(self, config_path: PathLike, profile: Optional[str] = None) -> QueryConfig:
        """
        Load and validate a config file, optionally with a profile overlay.

        Raises:
            FileNotFoundError: If the file or the profile overlay is missing
            ValueError: If a file does not hold a YAML mapping
            pydantic.ValidationError: If a value is out of range
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        data = _read_yaml(path)
        if profile:
            profile_path = path.parent / "profiles" / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(
                    f"Profile '{profile}' not found at {profile_path}"
                )
            data = _overlay(data, _read_yaml(profile_path))

        return QueryConfig.model_validate(data)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> QueryConfig:
        return QueryConfig.model_validate(config_dict)


def load_config(
    config_path: PathLike,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> QueryConfig:
    """Shortcut for ``ConfigLoader(base_path).load(config_path, profile)``."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
