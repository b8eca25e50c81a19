"""Configuration loader — reads and parses an agent configuration file.

This is the only place a document can fail fatally. Anything that gets past
load_config() is handed to the engine, which never raises on content.
"""

import json
from pathlib import Path
from typing import Union

import structlog

logger = structlog.get_logger()


class ConfigLoadError(Exception):
    """Base class for documents that cannot be handed to the engine."""


class ConfigNotFoundError(ConfigLoadError):
    """The configuration file does not exist."""


class ConfigParseError(ConfigLoadError):
    """The configuration file is unreadable, not JSON, or not a JSON object."""


def load_config(path: Union[str, Path]) -> dict:
    """Read a JSON configuration file and return its top-level object.

    Args:
        path: Path to the agent configuration file

    Returns:
        The parsed document

    Raises:
        ConfigNotFoundError: path does not exist
        ConfigParseError: file cannot be read or decoded, or is not an object
    """
    config_path = Path(path)

    if not config_path.exists():
        logger.warning("config_load_failed", path=str(config_path), reason="not_found")
        raise ConfigNotFoundError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        config = json.loads(content)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("config_load_failed", path=str(config_path), reason="parse_error", error=str(e))
        raise ConfigParseError(f"Failed to parse JSON configuration: {e}") from e

    if not isinstance(config, dict):
        logger.warning("config_load_failed", path=str(config_path), reason="not_an_object")
        raise ConfigParseError(
            f"Failed to parse JSON configuration: expected an object, got {type(config).__name__}"
        )

    return config
