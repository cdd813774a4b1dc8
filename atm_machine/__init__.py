"""
ATM machine - cash withdrawal engine.

Layers:
- core: value objects, exceptions, the Bank protocol
- domain: banknote deposit, allocation, withdrawal engine
- application: dict-based service and command routing for front-ends
- infrastructure: settings and an in-memory bank
"""

from atm_machine.application import ATMService, CommandHandler
from atm_machine.core import (
    ATMOperationError,
    AccountError,
    AuthorizationError,
    AuthorizationToken,
    Bank,
    Banknote,
    BanknotesPack,
    Card,
    ErrorCode,
    Money,
    PinCode,
    Withdrawal,
)
from atm_machine.domain import ATMachine, MoneyDeposit


__version__ = "0.1.0"

__all__ = [
    "ATMachine",
    "MoneyDeposit",
    "ATMService",
    "CommandHandler",
    "ATMOperationError",
    "AccountError",
    "AuthorizationError",
    "AuthorizationToken",
    "Bank",
    "Banknote",
    "BanknotesPack",
    "Card",
    "ErrorCode",
    "Money",
    "PinCode",
    "Withdrawal",
]
