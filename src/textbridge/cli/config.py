#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/config.py
"""Configuration file discovery and loading for the textbridge CLI.

This module handles automatic discovery of configuration files and loading
them from TOML, YAML or JSON. Recognised keys:

- ``log_level`` - default logging level (``"DEBUG"``, ``"INFO"``...)
- ``quote_char`` - default quote character for ``textbridge quote``
- ``default_unit`` - default target unit for ``textbridge length``
- ``section`` - default section for ``textbridge ini``
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

from textbridge.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES
from textbridge.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_KEYS = frozenset({"log_level", "quote_char", "default_unit", "section"})


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.textbridge] table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict if the file has none

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get("textbridge", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.textbridge] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated files are checked in
    order (``.textbridge.toml``, ``.textbridge.yaml``, ``.textbridge.yml``,
    ``.textbridge.json``), then ``pyproject.toml`` if it has a
    ``[tool.textbridge]`` table.

    Returns
    -------
    Path or None
        Path to the first config file found

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
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Order: the ``TEXTBRIDGE_CONFIG`` environment variable, then the parent
    directory search of :func:`find_config_in_parents`, then the user's home
    directory.
    """
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)

    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".textbridge.toml")
    >>> print(config.get("quote_char"))
    '

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            if config is None:
                config = {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )

    unknown = sorted(set(config) - CONFIG_KEYS)
    if unknown:
        logger.debug(f"Ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    return {key: value for key, value in config.items() if key in CONFIG_KEYS}


def load_cli_config(explicit_path: str | None = None) -> Dict[str, Any]:
    """Load the configuration for one CLI invocation.

    An explicit ``--config`` path wins over discovery. Returns an empty dict
    when no configuration file exists.
    """
    config_path = Path(explicit_path) if explicit_path else discover_config_file()
    if config_path is None:
        return {}
    logger.debug(f"Loading configuration from {config_path}")
    return load_config_file(config_path)
