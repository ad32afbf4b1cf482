# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating mailrender configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/mailrender/  (default: ~/.config/mailrender/)
#
# Files:
#   - config.toml: User configuration (strategy order, column width, ...)
#
# Example config.toml:
#
#   [general]
#   strip_urls = true
#   log_level = "WARNING"
#
#   [rendering]
#   strategies = ["w3m", "markdown"]
#   columns = 120
#   w3m_command = "w3m"
#   w3m_timeout = 0
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from mailrender.rendering.external import is_w3m_available


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "mailrender"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for mailrender.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/mailrender/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

# HTML conversion strategies the engine knows how to build
KNOWN_STRATEGIES = ("w3m", "inscriptis", "markdown")


@dataclass
class RenderingConfig:
    """
    Configuration for the HTML rendering engine.

    Attributes:
        strategies: HTML converters to try, in order. The first one that
                    succeeds is used.
                    - "w3m": External text browser (best layout)
                    - "inscriptis": In-process laid-out text
                    - "markdown": In-process HTML→markdown (always works)
        columns: Column width the text browser lays pages out for.
        w3m_command: w3m executable name or path.
        w3m_timeout: Seconds to wait for w3m (0 = no timeout).
    """
    strategies: list[str] = field(default_factory=lambda: ["w3m", "markdown"])
    columns: int = 120                  # w3m -cols
    w3m_command: str = "w3m"
    w3m_timeout: float = 0              # 0 = wait for w3m forever


@dataclass
class Config:
    """
    Main configuration container for mailrender.

    Attributes:
        strip_urls: Remove long URLs (and markdown link targets) by default.
        log_level: Logging level name for the command-line tool.
        rendering: HTML rendering configuration.

    Usage:
        >>> config = Config.load()
        >>> config.rendering.strategies
        ['w3m', 'markdown']
    """
    strip_urls: bool = True
    log_level: str = "WARNING"

    rendering: RenderingConfig = field(default_factory=RenderingConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the default config file doesn't exist, returns default
        configuration. An explicitly given path must exist.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file is missing (explicit path only),
                unreadable, or invalid.
        """
        if path is not None and not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    def validate(self) -> None:
        """
        Check values that TOML typing alone can't catch.

        Raises:
            ConfigError: On the first invalid value found.
        """
        strategies = self.rendering.strategies
        if not isinstance(strategies, list) or not strategies:
            raise ConfigError("rendering.strategies must be a non-empty list")
        unknown = [s for s in strategies if s not in KNOWN_STRATEGIES]
        if unknown:
            raise ConfigError(
                f"Unknown rendering strategies: {', '.join(map(str, unknown))} "
                f"(known: {', '.join(KNOWN_STRATEGIES)})"
            )

        if not isinstance(self.strip_urls, bool):
            raise ConfigError("general.strip_urls must be true or false")

        # bool is an int subclass; TOML true/false is not a number here
        columns = self.rendering.columns
        if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
            raise ConfigError("rendering.columns must be a positive integer")

        timeout = self.rendering.w3m_timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise ConfigError("rendering.w3m_timeout must be zero or a positive number")

        if not isinstance(self.rendering.w3m_command, str) or not self.rendering.w3m_command:
            raise ConfigError("rendering.w3m_command must be a non-empty string")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).
        """
        config = cls()

        # General settings
        general = _section(data, "general")
        config.strip_urls = general.get("strip_urls", True)
        config.log_level = general.get("log_level", "WARNING")

        # Rendering settings
        rendering = _section(data, "rendering")
        config.rendering = RenderingConfig(
            strategies=rendering.get("strategies", ["w3m", "markdown"]),
            columns=rendering.get("columns", 120),
            w3m_command=rendering.get("w3m_command", "w3m"),
            w3m_timeout=rendering.get("w3m_timeout", 0),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "general": {
                "strip_urls": self.strip_urls,
                "log_level": self.log_level,
            },
            "rendering": {
                "strategies": list(self.rendering.strategies),
                "columns": self.rendering.columns,
                "w3m_command": self.rendering.w3m_command,
                "w3m_timeout": self.rendering.w3m_timeout,
            },
        }


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a TOML table, or {} when absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, not {type(section).__name__}")
    return section


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print the config paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:       {get_xdg_config_home()}")
    print(f"Config file:  {Config.config_file_path()}")
    print(f"w3m:          {'found' if is_w3m_available() else 'not found'}")
