"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    ATMError,
    ATMOperationError,
    ErrorCode,
    InvalidTransitionError,
    BankError,
    AuthorizationError,
    AccountError,
    DepositError,
    DepositConfigurationError,
)
from .interfaces import Bank
from .value_objects import (
    Money,
    Banknote,
    BanknotesPack,
    Card,
    PinCode,
    AuthorizationToken,
    Withdrawal,
)


__all__ = [
    # Exceptions
    "ATMError",
    "ATMOperationError",
    "ErrorCode",
    "InvalidTransitionError",
    "BankError",
    "AuthorizationError",
    "AccountError",
    "DepositError",
    "DepositConfigurationError",
    # Interfaces
    "Bank",
    # Value Objects
    "Money",
    "Banknote",
    "BanknotesPack",
    "Card",
    "PinCode",
    "AuthorizationToken",
    "Withdrawal",
]
