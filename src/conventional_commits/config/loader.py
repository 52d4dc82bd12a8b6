"""
Configuration loader for conventional_commits.

Settings are read from a JSON file named ``config.json`` located in the
``~/.conventional_commits/`` directory, or from an explicit path. The
loader validates the structure of the file and returns a dictionary with
every setting filled in.

If the default file does not exist, the defaults are used. An explicit
path that does not exist, a malformed file, unknown keys or values of the
wrong type raise a :class:`ConfigError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from conventional_commits.serialization.json_serializer import JsonSerializer
from conventional_commits.serialization.records import SeparatorStyle


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings. Records still
# propagate to the root logger once the CLI has configured it.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = "config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_CONFIG: Dict[str, Any] = {
    "separator_style": SeparatorStyle.NAME.value,
    "indent": None,
    "strict": True,
    "log_level": "INFO",
}


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the per-user configuration directory, ``~/.conventional_commits/``."""
    return Path.home() / ".conventional_commits"


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration and return it merged over the defaults.

    Args:
        path: Explicit configuration file. When omitted, ``config.json``
              in :func:`_get_config_directory` is used if it exists.

    Returns:
        A dictionary with keys:
        - separator_style (str): ``"name"`` or ``"text"``
        - indent (int|None): JSON indentation, ``None`` for compact output
        - strict (bool): only accept separators in ``separator_style``
        - log_level (str): one of DEBUG, INFO, WARNING, ERROR

    Raises:
        ConfigError: If an explicit file is missing, or the file is
            malformed or invalid.
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if path is None:
        config_path = _get_config_directory() / CONFIG_FILE_NAME
        if not config_path.exists():
            logger.debug("No configuration file at %s, using defaults", config_path)
            return config
    else:
        config_path = Path(path)
        if not config_path.exists():
            logger.error("Configuration file '%s' does not exist", config_path)
            raise ConfigError(f"Missing configuration file: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        logger.error("Configuration file %s does not contain a JSON object", config_path)
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    unknown = sorted(key for key in data if key not in DEFAULT_CONFIG)
    if unknown:
        logger.error("Configuration file has unknown keys: %s", unknown)
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        _validate(data)
    except ConfigError as exc:
        logger.error("Rejected configuration file %s: %s", config_path, exc)
        raise
    config.update(data)

    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config


def _validate(data: Dict[str, Any]) -> None:
    styles = [style.value for style in SeparatorStyle]
    if "separator_style" in data and data["separator_style"] not in styles:
        raise ConfigError(f"'separator_style' must be one of: {', '.join(styles)}")
    if "indent" in data:
        indent = data["indent"]
        # bool is a subclass of int
        if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
            raise ConfigError("'indent' must be a non-negative integer or null")
    if "strict" in data and not isinstance(data["strict"], bool):
        raise ConfigError("'strict' must be a boolean")
    if "log_level" in data and data["log_level"] not in LOG_LEVELS:
        raise ConfigError(f"'log_level' must be one of: {', '.join(LOG_LEVELS)}")


def serializer_from_config(config: Dict[str, Any]) -> JsonSerializer:
    """Build the :class:`JsonSerializer` described by ``config``."""
    return JsonSerializer(
        separator_style=SeparatorStyle(config["separator_style"]),
        indent=config["indent"],
        strict=config["strict"],
    )
