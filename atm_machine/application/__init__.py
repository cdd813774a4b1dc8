"""
Application layer - Application services and use cases.

Contains:
- ATM service
- Command handler
"""

from .atm_service import ATMService
from .command_handler import CommandHandler, CommandResponse


__all__ = [
    "ATMService",
    "CommandHandler",
    "CommandResponse",
]
