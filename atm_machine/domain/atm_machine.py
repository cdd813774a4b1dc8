"""
ATMachine - Cash withdrawal engine.

Checks the request against the machine currency and the notes in the
deposit, authorizes and charges through the bank, then hands out notes.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from atm_machine.core.exceptions import (
    AccountError,
    ATMOperationError,
    AuthorizationError,
    DepositConfigurationError,
    ErrorCode,
)
from atm_machine.core.interfaces import Bank
from atm_machine.core.value_objects import Card, Money, PinCode, Withdrawal
from atm_machine.domain.allocation import expand_allocation, greedy_allocation
from atm_machine.domain.money_deposit import MoneyDeposit
from atm_machine.domain.withdrawal_state_machine import (
    WithdrawalContext,
    WithdrawalPhase,
    WithdrawalStateMachine,
)
from atm_machine.infrastructure.settings import get_settings
from atm_machine.loggers import logger


class ATMachine:
    """
    Cash machine for a single currency.

    Owns its banknote deposit. Withdrawals are serialized so two requests
    can never be promised the same notes.
    """

    def __init__(self, bank: Bank, currency: Optional[str] = None) -> None:
        """
        Initialize the machine with an empty deposit.

        Args:
            bank: Bank used to authorize cards and charge accounts.
            currency: Machine currency (defaults to the configured one).
        """
        self._bank = bank
        self._currency = currency or get_settings().machine.currency
        self._deposit = MoneyDeposit.empty(self._currency)
        self._lock = threading.Lock()
        self._last_attempt: Optional[WithdrawalContext] = None

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def current_deposit(self) -> MoneyDeposit:
        """
        Snapshot of the banknote deposit.

        Changes to the returned deposit do not reach the machine.
        """
        with self._lock:
            return self._deposit.copy()

    @property
    def last_attempt(self) -> Optional[WithdrawalContext]:
        """Context of the most recent withdrawal attempt."""
        return self._last_attempt

    def set_deposit(self, deposit: MoneyDeposit) -> None:
        """
        Load a new banknote deposit.

        Args:
            deposit: Deposit in the machine currency.

        Raises:
            DepositConfigurationError: If the deposit currency differs.
        """
        if deposit.currency != self._currency:
            raise DepositConfigurationError(
                f"Deposit currency {deposit.currency} does not match machine currency {self._currency}",
                details={"deposit_currency": deposit.currency, "machine_currency": self._currency},
            )

        with self._lock:
            self._deposit = deposit.copy()

        logger.info(f"Deposit loaded: {deposit.total_amount} {deposit.currency}")

    def withdraw(self, pin: PinCode, card: Card, money: Money) -> Withdrawal:
        """
        Withdraw cash.

        Args:
            pin: PIN entered by the customer.
            card: Customer card.
            money: Requested amount.

        Returns:
            The dispensed notes.

        Raises:
            ATMOperationError: With ``WRONG_CURRENCY``, ``WRONG_AMOUNT``,
                ``AUTHORIZATION`` or ``NO_FUNDS_ON_ACCOUNT``, checked in
                that order. The deposit is unchanged on failure.
        """
        with self._lock:
            machine = WithdrawalStateMachine(money)
            self._last_attempt = machine.context

            logger.info(f"Withdrawal requested: {money}, card {card.masked}")

            if money.currency != self._currency:
                raise self._reject(
                    machine,
                    ErrorCode.WRONG_CURRENCY,
                    f"Machine only dispenses {self._currency}",
                    requested_currency=money.currency,
                    machine_currency=self._currency,
                )
            machine.advance(WithdrawalPhase.CURRENCY_CHECKED)

            allocation = greedy_allocation(money.amount, self._deposit.available)
            if allocation is None:
                raise self._reject(
                    machine,
                    ErrorCode.WRONG_AMOUNT,
                    f"Cannot dispense {money} from the available banknotes",
                    requested_amount=money.amount,
                    available_amount=self._deposit.total_amount,
                )
            machine.context.allocation = allocation
            machine.advance(WithdrawalPhase.AMOUNT_VALIDATED)

            try:
                token = self._bank.authorize(pin.pin, card.number)
            except AuthorizationError as e:
                raise self._reject(machine, ErrorCode.AUTHORIZATION, e.message) from e
            machine.advance(WithdrawalPhase.AUTHORIZED)

            try:
                self._bank.charge(token, money)
            except AccountError as e:
                raise self._reject(machine, ErrorCode.NO_FUNDS_ON_ACCOUNT, e.message) from e
            machine.advance(WithdrawalPhase.CHARGED)

            self._deposit.dispense(allocation)
            machine.advance(WithdrawalPhase.DISPENSED)

        withdrawal = Withdrawal.create(self._currency, expand_allocation(allocation))
        logger.info(
            f"Withdrawal completed: {withdrawal.amount} {withdrawal.currency} "
            f"in {len(withdrawal.banknotes)} notes"
        )
        return withdrawal

    @staticmethod
    def _reject(
        machine: WithdrawalStateMachine,
        error_code: ErrorCode,
        message: str,
        **details: Any,
    ) -> ATMOperationError:
        """Fail the attempt and build the error to raise."""
        machine.fail(error_code)
        return ATMOperationError(error_code, message, details=details)
