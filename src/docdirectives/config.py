#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/config.py
"""Configuration file discovery and loading.

Configuration files hold one table per transform plus an optional
``transforms`` list::

    # .docdirectives.toml
    transforms = ["callout", "embed", "link-preview", "heading-ids"]

    [callout]
    default_variant = "info"
    aliases = { note = "info", caution = "warning" }

    [embed.providers]
    loom = "https://www.loom.com/embed/{id}"

    [link_preview]
    exclude_domains = ["internal.example.com"]

The same tables may live under ``[tool.docdirectives]`` in pyproject.toml,
or in a YAML or JSON file.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from docdirectives.exceptions import ConfigError, ValidationError
from docdirectives.options.pipeline import PipelineOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOCDIRECTIVES_CONFIG"
CONFIG_FILENAMES = [".docdirectives.toml", ".docdirectives.yaml", ".docdirectives.yml", ".docdirectives.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.docdirectives]`` table, or an empty dict if absent."""
    config = _load_toml_config(pyproject_path).get("tool", {}).get("docdirectives", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.docdirectives] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen by file name and extension. For ``pyproject.toml``
    only the ``[tool.docdirectives]`` table is returned.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    ConfigError
        If the file does not exist, cannot be read or parsed, or has an
        unsupported extension

    Examples
    --------
    >>> config = load_config_file(".docdirectives.toml")
    >>> config["callout"]["default_variant"]
    'info'

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext or filename}. Use .toml, .yaml or .json",
                config_path=str(config_path),
            )
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or any parent directory.

    Each directory is checked for the dedicated config file names first,
    then for a pyproject.toml with a ``[tool.docdirectives]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file() -> Optional[Path]:
    """Find a configuration file in the parent directories or the home directory."""
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration mappings, recursing into nested tables.

    Examples
    --------
    >>> merge_configs({"callout": {"default_variant": "info"}}, {"callout": {"title_override": "Note"}})
    {'callout': {'default_variant': 'info', 'title_override': 'Note'}}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_with_priority(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from the first available source.

    Priority order:
    1. ``explicit_path`` (the ``--config`` flag)
    2. the ``DOCDIRECTIVES_CONFIG`` environment variable
    3. an auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty when no file is found)

    Raises
    ------
    ConfigError
        If a named config file cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return load_config_file(env_path)

    discovered = discover_config_file()
    if discovered:
        return load_config_file(discovered)

    return {}


def load_pipeline_options(config_path: Path | str | None = None) -> PipelineOptions:
    """Load a config file and build PipelineOptions from it.

    Parameters
    ----------
    config_path : Path or str, optional
        Configuration file; when None the file is looked up with
        :func:`load_config_with_priority`

    Raises
    ------
    ConfigError
        If the file cannot be loaded or its contents are invalid

    """
    config = load_config_with_priority(str(config_path) if config_path else None)
    try:
        return PipelineOptions.from_dict(config)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e}",
            config_path=str(config_path) if config_path else None,
            original_error=e,
        ) from e


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAMES",
    "load_config_file",
    "find_config_in_parents",
    "discover_config_file",
    "merge_configs",
    "load_config_with_priority",
    "load_pipeline_options",
]
