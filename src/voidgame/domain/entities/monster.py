"""Monster runtime model."""
from __future__ import annotations

from .combatant import Combatant
from .stats import StatBlock


class Monster(Combatant):
    """A combatant spawned for a single encounter."""

    def __init__(
        self,
        name: str,
        max_hp: int,
        exp_given: int,
        base_stats: StatBlock,
        *,
        monster_id: int | None = None,
    ) -> None:
        if exp_given < 0:
            raise ValueError(f"exp_given cannot be negative (got {exp_given}).")
        super().__init__(name, max_hp, base_stats)
        self.exp_given = exp_given
        self.monster_id = monster_id

    def __repr__(self) -> str:
        return f"Monster(name={self.name!r}, hp={self.current_hp}/{self.max_hp}, exp_given={self.exp_given})"
