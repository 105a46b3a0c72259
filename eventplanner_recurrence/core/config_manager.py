"""Configuration management for eventplanner_recurrence."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "EVENTPLANNER_"

DEFAULT_TIMEZONE = "UTC"
# Conflict checks between two bounded recurring events only look this far ahead
DEFAULT_CONFLICT_WINDOW_DAYS = 31
# Upper bound on the window accepted by the CLI expand command
DEFAULT_MAX_EXPANSION_DAYS = 3660


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse a .env file and return key-value pairs.

    Args:
        path: Path to .env file

    Returns:
        Dictionary of key-value pairs from the .env file.
        Empty dict if file doesn't exist or cannot be read.

    Note:
        - Skips empty lines and comments (lines starting with #)
        - Strips quotes (both single and double) from values
        - Handles KEY=VALUE format with optional whitespace
    """
    if not path.exists():
        return {}

    result: dict[str, str] = {}

    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        logger.debug("Failed to read .env file (continuing): %s", str(path), exc_info=True)
        return result

    for raw_line in content.splitlines():
        line = raw_line.strip()

        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, val = line.split("=", 1)
        key = key.strip()
        val = val.strip().strip('"').strip("'")

        if key:
            result[key] = val

    return result


@dataclass
class RecurrenceConfig:
    """Settings for recurrence expansion and conflict checks."""

    default_timezone: str = DEFAULT_TIMEZONE
    conflict_window_days: int = DEFAULT_CONFLICT_WINDOW_DAYS
    max_expansion_days: int = DEFAULT_MAX_EXPANSION_DAYS
    log_level: str = "INFO"

    @classmethod
    def from_settings(cls, settings: Any) -> RecurrenceConfig:
        """Extract recurrence configuration from a dict or settings object.

        Args:
            settings: Configuration mapping or object with matching attributes

        Returns:
            RecurrenceConfig with values from settings or defaults
        """
        return cls(
            default_timezone=get_config_value(settings, "default_timezone", DEFAULT_TIMEZONE),
            conflict_window_days=int(
                get_config_value(settings, "conflict_window_days", DEFAULT_CONFLICT_WINDOW_DAYS)
            ),
            max_expansion_days=int(
                get_config_value(settings, "max_expansion_days", DEFAULT_MAX_EXPANSION_DAYS)
            ),
            log_level=str(get_config_value(settings, "log_level", "INFO")).upper(),
        )


class ConfigManager:
    """Manages configuration from environment variables and .env files."""

    def __init__(self, env_file_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            env_file_path: Optional path to .env file (defaults to .env in current directory)
        """
        self.env_file_path = env_file_path or Path.cwd() / ".env"

    def load_env_file(self) -> list[str]:
        """Load .env file and set environment variables.

        Only sets variables that are not already in the environment.

        Returns:
            List of environment variable keys that were loaded from .env file
        """
        if not self.env_file_path.exists():
            logger.debug("No .env file found at %s", self.env_file_path)
            return []

        parsed = parse_env_file(self.env_file_path)

        set_keys = []
        for key, val in parsed.items():
            if key not in os.environ:
                os.environ[key] = val
                set_keys.append(key)

        if set_keys:
            logger.debug("Loaded .env defaults for keys: %s", ", ".join(set_keys))

        return set_keys

    def build_config_from_env(self) -> dict[str, Any]:
        """Build configuration dictionary from environment variables.

        Recognizes:
        - EVENTPLANNER_DEFAULT_TIMEZONE -> 'default_timezone'
        - EVENTPLANNER_CONFLICT_WINDOW_DAYS -> 'conflict_window_days' (int)
        - EVENTPLANNER_MAX_EXPANSION_DAYS -> 'max_expansion_days' (int)
        - EVENTPLANNER_LOG_LEVEL -> 'log_level'

        Returns:
            Configuration dictionary accepted by RecurrenceConfig.from_settings
        """
        cfg: dict[str, Any] = {}

        default_tz = os.environ.get(f"{ENV_PREFIX}DEFAULT_TIMEZONE")
        if default_tz:
            cfg["default_timezone"] = default_tz

        for key in ("conflict_window_days", "max_expansion_days"):
            env_name = f"{ENV_PREFIX}{key.upper()}"
            raw = os.environ.get(env_name)
            if not raw:
                continue
            try:
                value = int(raw)
            except ValueError:
                logger.warning("Invalid %s=%r; ignoring", env_name, raw)
                continue
            if value < 1:
                logger.warning("Invalid %s=%r; must be positive, ignoring", env_name, raw)
                continue
            cfg[key] = value

        log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            cfg["log_level"] = log_level.upper()

        return cfg

    def load_full_config(self) -> RecurrenceConfig:
        """Load .env file and build configuration from environment.

        This is the main entry point for loading configuration.
        """
        self.load_env_file()
        return RecurrenceConfig.from_settings(self.build_config_from_env())


def config_from_env() -> RecurrenceConfig:
    """Build a RecurrenceConfig from the current environment only.

    Does not read or apply a .env file; used by library calls that were not
    handed a loaded configuration.
    """
    return RecurrenceConfig.from_settings(ConfigManager().build_config_from_env())


def resolve_config(config: RecurrenceConfig | None) -> RecurrenceConfig:
    return config if config is not None else config_from_env()


def get_config_value(config: Any, key: str, default: Any = None) -> Any:
    """Get configuration value supporting both dict and dataclass-like objects.

    Args:
        config: Configuration object (dict or object with attributes)
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    if config is None:
        return default
    if isinstance(config, dict):
        return config.get(key, default)
    return getattr(config, key, default)
