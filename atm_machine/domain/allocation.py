"""
Banknote allocation for withdrawals.

Uses a greedy pass over denominations, highest first. Amounts the greedy
pass cannot hit exactly are rejected even when another combination of the
available notes would add up, so results stay reproducible.
"""

from typing import Mapping, Optional

from atm_machine.core.value_objects import Banknote


Allocation = dict[Banknote, int]


def greedy_allocation(amount: int, available: Mapping[Banknote, int]) -> Optional[Allocation]:
    """
    Calculate which notes to dispense for ``amount``.

    Args:
        amount: Amount to dispense.
        available: Number of notes available per banknote.

    Returns:
        Mapping of banknote to note count, highest denomination first,
        or None if the amount cannot be dispensed exactly.
    """
    if amount <= 0:
        return None

    remaining = amount
    allocation: Allocation = {}

    for banknote in sorted(available, key=lambda note: note.denomination, reverse=True):
        use = min(remaining // banknote.denomination, available[banknote])
        if use > 0:
            allocation[banknote] = use
            remaining -= banknote.denomination * use

        if remaining == 0:
            break

    if remaining != 0:
        return None

    return allocation


def expand_allocation(allocation: Mapping[Banknote, int]) -> list[Banknote]:
    """Turn an allocation into one entry per physical note, highest first."""
    notes: list[Banknote] = []
    for banknote in sorted(allocation, key=lambda note: note.denomination, reverse=True):
        notes.extend([banknote] * allocation[banknote])
    return notes
