"""Per-combatant tracking of temporary status effects."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from voidgame.core.types import StatusKind

STATUS_KINDS: Tuple[StatusKind, ...] = ("haste", "protect", "slow", "stop")
HASTE_DURATION = 3


@dataclass(slots=True)
class EffectCounter:
    """Remaining duration and consumed-round bookkeeping for one effect."""

    remaining: int = 0
    pending: int = 0


def _empty_effects() -> Dict[StatusKind, EffectCounter]:
    return {kind: EffectCounter() for kind in STATUS_KINDS}


@dataclass(slots=True)
class StatusEffectTracker:
    """Status effects held by a single combatant.

    Only haste is resolved by the battle engine today. Protect, slow and stop
    can be applied and queried but nothing reacts to them yet.
    """

    effects: Dict[StatusKind, EffectCounter] = field(default_factory=_empty_effects)

    def apply(self, kind: StatusKind, duration: int) -> None:
        """Set ``kind`` to ``duration`` rounds, overwriting any active duration."""
        if duration < 0:
            raise ValueError(f"Effect duration cannot be negative ({duration}).")
        self.effects[kind].remaining = duration

    def remaining(self, kind: StatusKind) -> int:
        return self.effects[kind].remaining

    def pending(self, kind: StatusKind) -> int:
        return self.effects[kind].pending

    def is_active(self, kind: StatusKind) -> bool:
        return self.effects[kind].remaining > 0

    def consume_round(self, kind: StatusKind) -> bool:
        """Spend one round of ``kind``; returns False when it is not active."""
        counter = self.effects[kind]
        if counter.remaining <= 0:
            return False
        counter.remaining -= 1
        counter.pending += 1
        return True

    @property
    def haste_rounds_remaining(self) -> int:
        return self.remaining("haste")

    @property
    def extra_turns_pending(self) -> int:
        return self.pending("haste")

    @property
    def protect(self) -> bool:
        return self.is_active("protect")

    @property
    def slow(self) -> bool:
        return self.is_active("slow")

    @property
    def stop(self) -> bool:
        return self.is_active("stop")
