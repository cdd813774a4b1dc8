"""
Application settings.

Provides typed, validated configuration with environment variable support.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from atm_machine.configs import (
    DEFAULT_CURRENCY,
    ENV_CURRENCY,
    ENV_LOG_APP,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_LOKI_URL,
    LOG_APP,
    LOG_LEVEL,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class MachineSettings:
    """Withdrawal engine settings."""

    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True)
class LoggingSettings:
    """Logging output settings."""

    level: str = LOG_LEVEL
    app: str = LOG_APP
    log_file: Optional[str] = None
    loki_url: Optional[str] = None

    @property
    def level_number(self) -> int:
        """Get the numeric logging level."""
        level = logging.getLevelName(self.level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.level}")
        return level


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    machine: MachineSettings = field(default_factory=MachineSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from ``ATM_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            Settings instance.
        """
        env = os.environ if environ is None else environ

        return cls(
            machine=MachineSettings(
                currency=env.get(ENV_CURRENCY, DEFAULT_CURRENCY).upper(),
            ),
            logging=LoggingSettings(
                level=env.get(ENV_LOG_LEVEL, LOG_LEVEL),
                app=env.get(ENV_LOG_APP, LOG_APP),
                log_file=env.get(ENV_LOG_FILE) or None,
                loki_url=env.get(ENV_LOKI_URL) or None,
            ),
        )


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
