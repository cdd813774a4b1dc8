"""
ATM Service - Application service for terminal front-ends.

Turns raw request values into domain objects, runs withdrawals on the
machine and reports results as plain dictionaries.
"""

from typing import Any, Optional

from atm_machine.core.exceptions import ATMOperationError
from atm_machine.core.value_objects import Card, Money, PinCode
from atm_machine.domain.atm_machine import ATMachine
from atm_machine.loggers import logger


INVALID_REQUEST = "INVALID_REQUEST"


def parse_amount(amount: Any) -> int:
    """
    Parse a requested amount without rounding.

    Accepts ints and strings of digits. Fractional values are rejected
    rather than truncated.

    Raises:
        ValueError: If the amount is not a whole number.
    """
    if isinstance(amount, int) and not isinstance(amount, bool):
        return amount
    if isinstance(amount, str) and amount.strip().lstrip("-").isdigit():
        return int(amount.strip())
    raise ValueError(f"Amount must be a whole number, got {amount!r}")


class ATMService:
    """
    Application service for withdrawal operations.

    Every method returns a dictionary with ``success``, ``message`` and
    ``data`` keys instead of raising for rejected requests.
    """

    def __init__(self, machine: ATMachine) -> None:
        """
        Initialize the service.

        Args:
            machine: Machine to operate on.
        """
        self._machine = machine

    @property
    def machine(self) -> ATMachine:
        return self._machine

    def withdraw(
        self,
        pin: str,
        card_number: str,
        amount: int,
        currency: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Withdraw cash.

        Args:
            pin: PIN digits as entered.
            card_number: Card number.
            amount: Requested amount.
            currency: Requested currency (defaults to the machine currency).

        Returns:
            Dictionary with success status and the dispensed notes, or the
            error code on failure.
        """
        try:
            pin_code = PinCode.parse(str(pin))
            card = Card.create(str(card_number))
            money = Money(parse_amount(amount), str(currency or self._machine.currency).upper())
        except (TypeError, ValueError) as e:
            logger.warning(f"Rejected malformed withdrawal request: {e}")
            return {
                "success": False,
                "message": f"Invalid request: {e}",
                "data": {"error": INVALID_REQUEST},
            }

        try:
            withdrawal = self._machine.withdraw(pin_code, card, money)
        except ATMOperationError as e:
            return {"success": False, "message": e.message, "data": e.to_dict()}

        return {
            "success": True,
            "message": f"Dispensed {withdrawal.amount} {withdrawal.currency}",
            "data": withdrawal.to_dict(),
        }

    def deposit_status(self) -> dict[str, Any]:
        """
        Get the banknote deposit status.

        Returns:
            Dictionary with the note count per denomination and the total.
        """
        deposit = self._machine.current_deposit
        return {
            "success": True,
            "message": f"Available: {deposit.total_amount} {deposit.currency}",
            "data": deposit.to_dict(),
        }
