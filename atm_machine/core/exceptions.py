"""
Custom exceptions for the ATM machine.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages.
"""

from enum import Enum, auto
from typing import Any, Optional


class ErrorCode(Enum):
    """Classified reasons a withdrawal can fail, in the order they are checked."""

    WRONG_CURRENCY = auto()
    WRONG_AMOUNT = auto()
    AUTHORIZATION = auto()
    NO_FUNDS_ON_ACCOUNT = auto()


class ATMError(Exception):
    """Base exception for all ATM machine errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Withdrawal Errors
# =============================================================================


class ATMOperationError(ATMError):
    """A withdrawal was rejected; ``error_code`` tells why."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or error_code.name.replace("_", " ").capitalize(),
            code=error_code.name,
            **kwargs,
        )
        self.error_code = error_code


# =============================================================================
# Bank Errors
# =============================================================================


class BankError(ATMError):
    """Base exception for errors reported by a bank."""

    pass


class AuthorizationError(BankError):
    """The bank rejected the PIN and card pair."""

    def __init__(self, message: str = "Authorization rejected by bank", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class AccountError(BankError):
    """The bank refused to charge the account."""

    def __init__(self, message: str = "Insufficient funds on account", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


# =============================================================================
# Deposit Errors
# =============================================================================


class DepositError(ATMError):
    """Base exception for banknote deposit errors."""

    pass


class DepositConfigurationError(DepositError):
    """The deposit was set up with invalid packs."""

    pass


class InvalidTransitionError(ATMError):
    """A withdrawal phase change that skips a step or leaves a finished attempt."""

    pass
