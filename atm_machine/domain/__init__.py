"""
Domain layer - Business logic and domain models.

Contains:
- Banknote deposit
- Greedy banknote allocation
- Withdrawal state machine
- Withdrawal engine
"""

from .allocation import (
    Allocation,
    greedy_allocation,
    expand_allocation,
)
from .money_deposit import MoneyDeposit
from .withdrawal_state_machine import (
    WithdrawalStateMachine,
    WithdrawalPhase,
    WithdrawalContext,
)
from .atm_machine import ATMachine


__all__ = [
    # Allocation
    "Allocation",
    "greedy_allocation",
    "expand_allocation",
    # Deposit
    "MoneyDeposit",
    # Withdrawal State
    "WithdrawalStateMachine",
    "WithdrawalPhase",
    "WithdrawalContext",
    # Engine
    "ATMachine",
]
