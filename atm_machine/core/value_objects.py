"""
Value Objects for the ATM machine.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from atm_machine.configs import DEFAULT_CURRENCY, PIN_LENGTH
from atm_machine.core.exceptions import DepositConfigurationError


_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


# =============================================================================
# Money Value Object
# =============================================================================


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing monetary amounts.

    Amounts are whole units of the currency's smallest banknote scale,
    so no floating point is involved.

    Attributes:
        amount: Non-negative amount.
        currency: ISO 4217 currency code.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Validate the amount and currency."""
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError(f"Amount must be an integer, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not _CURRENCY_CODE.match(self.currency):
            raise ValueError(f"Invalid currency code: {self.currency!r}")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


# =============================================================================
# Banknotes
# =============================================================================


class Banknote(Enum):
    """Banknotes the machine can hold, as (face value, currency)."""

    PL_10 = (10, "PLN")
    PL_20 = (20, "PLN")
    PL_50 = (50, "PLN")
    PL_100 = (100, "PLN")
    PL_200 = (200, "PLN")
    PL_500 = (500, "PLN")

    def __init__(self, denomination: int, currency: str) -> None:
        self.denomination = denomination
        self.currency = currency

    @classmethod
    def descending(cls, currency: Optional[str] = None) -> list["Banknote"]:
        """
        Get banknotes ordered from the highest face value.

        Args:
            currency: Only return banknotes of this currency.

        Returns:
            List of banknotes, highest denomination first.
        """
        notes = [note for note in cls if currency is None or note.currency == currency]
        return sorted(notes, key=lambda note: note.denomination, reverse=True)


@dataclass(frozen=True)
class BanknotesPack:
    """
    Inventory of a single denomination.

    Attributes:
        banknote: Denomination held in the pack.
        count: Number of notes available.
    """

    banknote: Banknote
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise DepositConfigurationError(
                f"Negative banknote count for {self.banknote.name}: {self.count}",
                details={"banknote": self.banknote.name, "count": self.count},
            )

    @classmethod
    def create(cls, count: int, banknote: Banknote) -> "BanknotesPack":
        """Create a pack of ``count`` notes of ``banknote``."""
        return cls(banknote=banknote, count=count)

    @property
    def denomination(self) -> int:
        return self.banknote.denomination

    @property
    def value(self) -> int:
        """Total value of the notes in the pack."""
        return self.banknote.denomination * self.count


# =============================================================================
# Customer Credentials
# =============================================================================


@dataclass(frozen=True)
class Card:
    """Payment card identified by its number."""

    number: str

    def __post_init__(self) -> None:
        if not self.number or not self.number.isdigit():
            raise ValueError("Card number must be a non-empty string of digits")

    @classmethod
    def create(cls, number: str) -> "Card":
        return cls(number=number)

    @property
    def masked(self) -> str:
        """Card number with all but the last four digits hidden."""
        return "*" * max(0, len(self.number) - 4) + self.number[-4:]


@dataclass(frozen=True, repr=False)
class PinCode:
    """
    Four digit PIN code.

    The representation is masked so PINs never end up in logs.
    """

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.digits) != PIN_LENGTH:
            raise ValueError(f"PIN must have exactly {PIN_LENGTH} digits")
        for digit in self.digits:
            if not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValueError("PIN digits must be integers between 0 and 9")

    @classmethod
    def create_pin(cls, *digits: int) -> "PinCode":
        """Create a PIN from its digits, e.g. ``create_pin(1, 9, 7, 3)``."""
        return cls(digits=tuple(digits))

    @classmethod
    def parse(cls, text: str) -> "PinCode":
        """Create a PIN from its text form, e.g. ``"1973"``."""
        if not text.isdigit():
            raise ValueError("PIN must contain digits only")
        return cls(digits=tuple(int(char) for char in text))

    @property
    def pin(self) -> str:
        """PIN digits as a string, the form the bank expects."""
        return "".join(str(digit) for digit in self.digits)

    def __repr__(self) -> str:
        return "PinCode(****)"


@dataclass(frozen=True)
class AuthorizationToken:
    """Opaque token issued by the bank for one authorized transaction."""

    value: str

    @classmethod
    def create(cls, value: str) -> "AuthorizationToken":
        return cls(value=value)


# =============================================================================
# Withdrawal Result
# =============================================================================


@dataclass(frozen=True)
class Withdrawal:
    """
    Result of a successful withdrawal.

    Attributes:
        currency: Currency of the dispensed notes.
        banknotes: One entry per physical note, highest denomination first.
    """

    currency: str
    banknotes: tuple[Banknote, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, currency: str, banknotes: Iterable[Banknote]) -> "Withdrawal":
        return cls(currency=currency, banknotes=tuple(banknotes))

    @property
    def amount(self) -> int:
        """Sum of the dispensed face values."""
        return sum(note.denomination for note in self.banknotes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        counts = Counter(note.denomination for note in self.banknotes)
        return {
            "currency": self.currency,
            "amount": self.amount,
            "banknotes": {str(value): count for value, count in counts.items()},
        }
