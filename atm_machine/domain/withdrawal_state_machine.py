"""
Withdrawal State Machine - Tracks the lifecycle of one withdrawal attempt.

Phases only move forward, one step at a time, and any phase can fail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from atm_machine.core.exceptions import ErrorCode, InvalidTransitionError
from atm_machine.core.value_objects import Banknote, Money
from atm_machine.loggers import logger


# =============================================================================
# Withdrawal Phases
# =============================================================================


class WithdrawalPhase(Enum):
    """Phases of a withdrawal attempt."""

    START = auto()              # Request received
    CURRENCY_CHECKED = auto()   # Currency matches the machine
    AMOUNT_VALIDATED = auto()   # Notes allocated from the deposit
    AUTHORIZED = auto()         # Bank accepted PIN and card
    CHARGED = auto()            # Bank charged the account
    DISPENSED = auto()          # Notes removed from the deposit
    FAILED = auto()             # Attempt rejected


_NEXT_PHASE: dict[WithdrawalPhase, WithdrawalPhase] = {
    WithdrawalPhase.START: WithdrawalPhase.CURRENCY_CHECKED,
    WithdrawalPhase.CURRENCY_CHECKED: WithdrawalPhase.AMOUNT_VALIDATED,
    WithdrawalPhase.AMOUNT_VALIDATED: WithdrawalPhase.AUTHORIZED,
    WithdrawalPhase.AUTHORIZED: WithdrawalPhase.CHARGED,
    WithdrawalPhase.CHARGED: WithdrawalPhase.DISPENSED,
}


# =============================================================================
# Withdrawal Context
# =============================================================================


@dataclass
class WithdrawalContext:
    """
    Context for a withdrawal attempt.

    Holds all state for the current attempt.
    """

    requested: Money
    phase: WithdrawalPhase = WithdrawalPhase.START
    allocation: dict[Banknote, int] = field(default_factory=dict)
    error_code: Optional[ErrorCode] = None
    failed_in: Optional[WithdrawalPhase] = None

    @property
    def is_finished(self) -> bool:
        return self.phase in (WithdrawalPhase.DISPENSED, WithdrawalPhase.FAILED)

    @property
    def succeeded(self) -> bool:
        return self.phase == WithdrawalPhase.DISPENSED


# =============================================================================
# Withdrawal State Machine
# =============================================================================


class WithdrawalStateMachine:
    """
    State machine for a single withdrawal attempt.

    ``START -> CURRENCY_CHECKED -> AMOUNT_VALIDATED -> AUTHORIZED ->
    CHARGED -> DISPENSED``, with ``FAILED`` reachable from any unfinished
    phase.
    """

    def __init__(self, requested: Money) -> None:
        self._context = WithdrawalContext(requested=requested)

    @property
    def context(self) -> WithdrawalContext:
        """Get the attempt context."""
        return self._context

    @property
    def phase(self) -> WithdrawalPhase:
        return self._context.phase

    def advance(self, phase: WithdrawalPhase) -> None:
        """
        Move to the next phase.

        Args:
            phase: Phase to enter; must directly follow the current one.

        Raises:
            InvalidTransitionError: If ``phase`` is not the next phase.
        """
        expected = _NEXT_PHASE.get(self._context.phase)
        if phase != expected:
            raise InvalidTransitionError(
                f"Cannot move from {self._context.phase.name} to {phase.name}"
            )

        logger.debug(f"Withdrawal of {self._context.requested}: {phase.name}")
        self._context.phase = phase

    def fail(self, error_code: ErrorCode) -> None:
        """
        Mark the attempt as failed.

        Args:
            error_code: Why the attempt was rejected.
        """
        if self._context.is_finished:
            raise InvalidTransitionError(
                f"Cannot fail a finished withdrawal ({self._context.phase.name})"
            )

        self._context.failed_in = self._context.phase
        self._context.phase = WithdrawalPhase.FAILED
        self._context.error_code = error_code
        logger.warning(
            f"Withdrawal of {self._context.requested} failed after "
            f"{self._context.failed_in.name}: {error_code.name}"
        )
