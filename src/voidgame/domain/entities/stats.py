"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass

STAT_CAP = 999


@dataclass(slots=True)
class StatBlock:
    """Stores the four base combat attributes.

    Values are not validated on construction; clamping only happens when a
    stat grows through leveling.
    """

    strength: int
    defense: int
    magic_attack: int
    magic_defense: int

    def grow(self, amount: int, *, cap: int = STAT_CAP) -> None:
        """Raise every stat by ``amount``, clamping each to [0, cap]."""
        self.strength = _clamp(self.strength + amount, cap)
        self.defense = _clamp(self.defense + amount, cap)
        self.magic_attack = _clamp(self.magic_attack + amount, cap)
        self.magic_defense = _clamp(self.magic_defense + amount, cap)


def _clamp(value: int, cap: int) -> int:
    return max(0, min(value, cap))
