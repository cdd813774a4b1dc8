"""
Money Deposit - Banknote inventory of the machine.

Tracks how many notes of each denomination are loaded. Counts only change
through ``dispense``, which checks the whole allocation before touching any
pack.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from atm_machine.core.exceptions import DepositConfigurationError, DepositError
from atm_machine.core.value_objects import Banknote, BanknotesPack
from atm_machine.loggers import logger


class MoneyDeposit:
    """
    Banknote inventory for one currency.

    Holds one pack per denomination, in the order the packs were loaded.
    """

    def __init__(self, currency: str, packs: Mapping[Banknote, int]) -> None:
        """
        Initialize the deposit.

        Use ``create`` or ``empty`` instead of calling this directly.

        Args:
            currency: Currency of every note in the deposit.
            packs: Note count per banknote.
        """
        self._currency = currency
        self._counts: dict[Banknote, int] = dict(packs)

    @classmethod
    def create(cls, currency: str, packs: Iterable[BanknotesPack]) -> MoneyDeposit:
        """
        Create a deposit from banknote packs.

        Args:
            currency: Currency of the deposit.
            packs: One pack per denomination.

        Returns:
            New deposit.

        Raises:
            DepositConfigurationError: On duplicate denominations or notes
                of another currency. Negative counts are already rejected
                by ``BanknotesPack``.
        """
        counts: dict[Banknote, int] = {}
        for pack in packs:
            if pack.banknote in counts:
                raise DepositConfigurationError(
                    f"Duplicate pack for {pack.banknote.name}",
                    details={"banknote": pack.banknote.name},
                )
            if pack.banknote.currency != currency:
                raise DepositConfigurationError(
                    f"{pack.banknote.name} is not a {currency} banknote",
                    details={"banknote": pack.banknote.name, "currency": currency},
                )
            counts[pack.banknote] = pack.count

        return cls(currency, counts)

    @classmethod
    def empty(cls, currency: str) -> MoneyDeposit:
        """Create a deposit with no packs."""
        return cls(currency, {})

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def banknotes(self) -> tuple[BanknotesPack, ...]:
        """Snapshot of the current packs."""
        return tuple(
            BanknotesPack(banknote=banknote, count=count)
            for banknote, count in self._counts.items()
        )

    def get_banknotes(self) -> tuple[BanknotesPack, ...]:
        return self.banknotes

    @property
    def available(self) -> dict[Banknote, int]:
        """Copy of the note count per banknote."""
        return dict(self._counts)

    @property
    def total_amount(self) -> int:
        """Total value of all notes in the deposit."""
        return sum(banknote.denomination * count for banknote, count in self._counts.items())

    def count_of(self, banknote: Banknote) -> int:
        return self._counts.get(banknote, 0)

    def copy(self) -> MoneyDeposit:
        """Independent deposit with the same counts."""
        return MoneyDeposit(self._currency, self._counts)

    def dispense(self, allocation: Mapping[Banknote, int]) -> None:
        """
        Remove notes from the deposit.

        Args:
            allocation: Number of notes to remove per banknote.

        Raises:
            DepositError: If any pack holds fewer notes than requested.
                The deposit is left unchanged.
        """
        for banknote, count in allocation.items():
            if count < 0 or count > self.count_of(banknote):
                raise DepositError(
                    f"Cannot dispense {count} x {banknote.name}, "
                    f"{self.count_of(banknote)} available",
                    details={
                        "banknote": banknote.name,
                        "requested": count,
                        "available": self.count_of(banknote),
                    },
                )

        for banknote, count in allocation.items():
            self._counts[banknote] -= count

        logger.debug(
            "Dispensed from deposit: "
            + ", ".join(f"{count} x {banknote.denomination}" for banknote, count in allocation.items())
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "currency": self._currency,
            "total_amount": self.total_amount,
            "banknotes": {
                str(banknote.denomination): count
                for banknote, count in self._counts.items()
            },
        }

    def __repr__(self) -> str:
        return f"MoneyDeposit(currency={self._currency!r}, total_amount={self.total_amount})"
