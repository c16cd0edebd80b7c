"""Result objects returned by combatant operations."""
from __future__ import annotations

from dataclasses import dataclass

from voidgame.core.types import CombatErrorKind


@dataclass(frozen=True, slots=True)
class CombatResult:
    """Outcome of a damage, heal, experience or spell operation.

    Recoverable failures (negative input, unknown spell, unimplemented effect)
    carry an ``error`` kind and a zero amount instead of raising.
    """

    amount: int
    message: str
    error: CombatErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: CombatErrorKind, message: str) -> "CombatResult":
        return cls(amount=0, message=message, error=error)
