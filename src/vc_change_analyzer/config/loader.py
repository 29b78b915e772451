"""
Configuration loader for vc_change_analyzer.

The tool reads an optional JSON configuration file named ``config.json``
located in the ``~/.diffcheckin/`` directory in the user's home
directory. The file may extend the exclusion list (paths that never take
part in analysis) and choose the default commit message style.

A missing file yields the built-in defaults. A malformed file, or one
whose keys have the wrong type, raises :class:`ConfigError`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet

from vc_change_analyzer.grouping.exclusion import DEFAULT_EXCLUDES
from vc_change_analyzer.message.formatter import CommitMessageStyle


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILE_NAME = "config.json"


class ConfigError(Exception):
    """Raised when the configuration file is malformed or invalid."""

    pass


@dataclass(frozen=True)
class AnalyzerConfig:
    """Process-wide, read-only analyzer settings."""

    exclude: FrozenSet[str] = DEFAULT_EXCLUDES
    default_style: CommitMessageStyle = CommitMessageStyle.CONVENTIONAL


DEFAULT_CONFIG = AnalyzerConfig()


def _get_config_directory() -> Path:
    """Return the directory holding the diffcheckin configuration."""
    return Path.home() / ".diffcheckin"


def load_config() -> AnalyzerConfig:
    """Load the analyzer configuration from the user's home directory.

    Recognised keys:

    - ``exclude`` (list of str, optional): paths appended to
      :data:`DEFAULT_EXCLUDES`.
    - ``default_style`` (str, optional): one of ``conventional``,
      ``simple`` or ``detailed``.

    Unknown keys are ignored.

    Returns:
        An :class:`AnalyzerConfig`. When the file does not exist the
        defaults are returned.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, is not
            a JSON object, or has keys of the wrong type.
    """
    config_path = _get_config_directory() / CONFIG_FILE_NAME

    if not config_path.exists():
        logger.debug("No configuration file at '%s', using defaults", config_path)
        return DEFAULT_CONFIG

    try:
        content = config_path.read_text(encoding="utf-8")
        data: Any = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    config = _parse_config(data)
    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config


def _parse_config(data: Dict[str, Any]) -> AnalyzerConfig:
    exclude = set(DEFAULT_EXCLUDES)
    if "exclude" in data:
        extra = data["exclude"]
        if not isinstance(extra, list) or not all(isinstance(item, str) for item in extra):
            raise ConfigError("'exclude' must be a list of strings")
        exclude.update(item for item in extra if item.strip())

    default_style = CommitMessageStyle.CONVENTIONAL
    if "default_style" in data:
        value = data["default_style"]
        if not isinstance(value, str):
            raise ConfigError("'default_style' must be a string")
        try:
            default_style = CommitMessageStyle(value)
        except ValueError:
            choices = ", ".join(style.value for style in CommitMessageStyle)
            raise ConfigError(f"'default_style' must be one of: {choices}") from None

    return AnalyzerConfig(exclude=frozenset(exclude), default_style=default_style)
