"""
In-memory Bank implementation.

Keeps accounts in a dictionary keyed by card number. Useful for demos,
terminal front-end development and tests that need a bank with real
balances instead of a mock.
"""

from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from typing import Optional

from atm_machine.configs import DEFAULT_CURRENCY
from atm_machine.core.exceptions import AccountError, AuthorizationError
from atm_machine.core.value_objects import AuthorizationToken, Money
from atm_machine.loggers import logger


# =============================================================================
# Account State
# =============================================================================


@dataclass
class BankAccount:
    """State data for a card account."""

    card_number: str
    pin: str
    balance: int = 0
    currency: str = DEFAULT_CURRENCY

    def can_cover(self, money: Money) -> bool:
        """Check if the account can pay ``money``."""
        return money.currency == self.currency and self.balance >= money.amount


# =============================================================================
# In-memory Bank
# =============================================================================


class InMemoryBank:
    """
    Bank that authorizes against stored PINs and charges stored balances.

    Tokens are single-use: a token is consumed by the first ``charge``
    call, whether or not the charge succeeds. Only the latest token of a
    card is valid, so authorizing again revokes the previous one.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, BankAccount] = {}
        self._tokens: dict[AuthorizationToken, str] = {}
        self._token_by_card: dict[str, AuthorizationToken] = {}
        self._lock = threading.Lock()

    def open_account(
        self,
        card_number: str,
        pin: str,
        balance: int = 0,
        currency: str = DEFAULT_CURRENCY,
    ) -> BankAccount:
        """
        Register an account for a card.

        Args:
            card_number: Card number.
            pin: PIN digits.
            balance: Opening balance.
            currency: Account currency.

        Returns:
            The new account.
        """
        account = BankAccount(card_number=card_number, pin=pin, balance=balance, currency=currency)
        with self._lock:
            self._accounts[card_number] = account
        return account

    def get_account(self, card_number: str) -> Optional[BankAccount]:
        return self._accounts.get(card_number)

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        with self._lock:
            account = self._accounts.get(card_number)
            if account is None or not secrets.compare_digest(account.pin, pin):
                logger.warning(f"Authorization rejected for card ending {card_number[-4:]}")
                raise AuthorizationError("Invalid PIN or card number")

            previous = self._token_by_card.pop(card_number, None)
            if previous is not None:
                self._tokens.pop(previous, None)

            token = AuthorizationToken.create(secrets.token_hex(16))
            self._tokens[token] = card_number
            self._token_by_card[card_number] = token
            return token

    def charge(self, token: AuthorizationToken, money: Money) -> None:
        with self._lock:
            card_number = self._tokens.pop(token, None)
            if card_number is None:
                raise AccountError("Unknown or already used authorization token")
            del self._token_by_card[card_number]

            account = self._accounts[card_number]
            if not account.can_cover(money):
                raise AccountError(
                    f"Account cannot cover {money}",
                    details={"balance": account.balance, "currency": account.currency},
                )

            account.balance -= money.amount
            logger.info(f"Charged {money} to card ending {card_number[-4:]}")
