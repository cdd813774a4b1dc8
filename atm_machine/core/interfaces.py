"""
Interfaces (Protocols) for the ATM machine.

Defines contracts for external collaborators using Python's Protocol
for structural subtyping (duck typing with type hints).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from atm_machine.core.value_objects import AuthorizationToken, Money


# =============================================================================
# Bank Interface
# =============================================================================


@runtime_checkable
class Bank(Protocol):
    """Protocol for the bank that authorizes cards and charges accounts."""

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        """
        Authorize a card holder.

        Args:
            pin: PIN digits as entered.
            card_number: Card number.

        Returns:
            Token valid for a single charge.

        Raises:
            AuthorizationError: If the PIN and card do not match.
        """
        ...

    def charge(self, token: AuthorizationToken, money: Money) -> None:
        """
        Charge the authorized account.

        Args:
            token: Token returned by ``authorize``.
            money: Amount to charge.

        Raises:
            AccountError: If the account cannot cover the amount.
        """
        ...
