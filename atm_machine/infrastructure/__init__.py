"""
Infrastructure layer - External dependencies and implementations.

Contains:
- Configuration
- In-memory bank (``infrastructure.in_memory_bank``)
"""

from .settings import (
    Settings,
    MachineSettings,
    LoggingSettings,
    get_settings,
    reset_settings,
)


__all__ = [
    # Settings
    "Settings",
    "MachineSettings",
    "LoggingSettings",
    "get_settings",
    "reset_settings",
]
