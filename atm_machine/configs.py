"""
Configuration module for the ATM machine.

This module provides centralized default values for the withdrawal engine
and its logging, overridable through environment variables read by
``infrastructure.settings``.
"""

from typing import Final


# =============================================================================
# Machine Configuration
# =============================================================================

DEFAULT_CURRENCY: Final[str] = "PLN"
PIN_LENGTH: Final[int] = 4


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_APP: Final[str] = "atm_machine"
LOG_LEVEL: Final[str] = "DEBUG"


# =============================================================================
# Environment Variables
# =============================================================================

ENV_PREFIX: Final[str] = "ATM_"
ENV_CURRENCY: Final[str] = f"{ENV_PREFIX}CURRENCY"
ENV_LOG_LEVEL: Final[str] = f"{ENV_PREFIX}LOG_LEVEL"
ENV_LOG_FILE: Final[str] = f"{ENV_PREFIX}LOG_FILE"
ENV_LOKI_URL: Final[str] = f"{ENV_PREFIX}LOKI_URL"
ENV_LOG_APP: Final[str] = f"{ENV_PREFIX}LOG_APP"
