"""
Pytest configuration for ATM machine tests.

Provides the reference banknote deposit and a machine wired to a mocked bank.
"""

from unittest.mock import MagicMock

import pytest

from atm_machine.core.interfaces import Bank
from atm_machine.core.value_objects import (
    AuthorizationToken,
    Banknote,
    BanknotesPack,
    Card,
    PinCode,
)
from atm_machine.domain.atm_machine import ATMachine
from atm_machine.domain.money_deposit import MoneyDeposit


PLN = "PLN"
USD = "USD"
CARD_NUMBER = "987456321025846"


@pytest.fixture
def card():
    return Card.create(CARD_NUMBER)


@pytest.fixture
def pin():
    return PinCode.create_pin(1, 9, 7, 3)


@pytest.fixture
def token():
    return AuthorizationToken.create("AUTH")


@pytest.fixture
def packs():
    """Reference packs: 200x10, 100x20, 40x50, 20x100, 10x200, 5x500."""
    return [
        BanknotesPack.create(200, Banknote.PL_10),
        BanknotesPack.create(100, Banknote.PL_20),
        BanknotesPack.create(40, Banknote.PL_50),
        BanknotesPack.create(20, Banknote.PL_100),
        BanknotesPack.create(10, Banknote.PL_200),
        BanknotesPack.create(5, Banknote.PL_500),
    ]


@pytest.fixture
def deposit(packs):
    return MoneyDeposit.create(PLN, packs)


@pytest.fixture
def total(deposit):
    """Total value of the reference deposit."""
    return sum(pack.denomination * pack.count for pack in deposit.get_banknotes())


@pytest.fixture
def bank(token):
    """Bank mock that authorizes everyone and accepts every charge."""
    mock_bank = MagicMock(spec=Bank)
    mock_bank.authorize.return_value = token
    return mock_bank


@pytest.fixture
def atm(bank, deposit):
    machine = ATMachine(bank, PLN)
    machine.set_deposit(deposit)
    return machine
