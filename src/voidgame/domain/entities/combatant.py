"""Shared behavior for everything that can take part in a battle."""
from __future__ import annotations

from voidgame.domain import combat_math
from voidgame.domain.results import CombatResult
from voidgame.domain.status_effects import StatusEffectTracker

from .stats import StatBlock


class Combatant:
    """Owns HP, base stats and status effects for one battle participant.

    ``current_hp`` is read-only from the outside: it only changes through
    ``take_physical_damage``, ``take_magic_damage`` and ``heal``, which keep it
    within [0, max_hp].
    """

    def __init__(self, name: str, max_hp: int, base_stats: StatBlock) -> None:
        if max_hp < 1:
            raise ValueError(f"max_hp must be at least 1 (got {max_hp}).")
        self.name = name
        self.base_stats = base_stats
        self.status_effects = StatusEffectTracker()
        self._max_hp = max_hp
        self._current_hp = max_hp

    @property
    def max_hp(self) -> int:
        return self._max_hp

    @property
    def current_hp(self) -> int:
        return self._current_hp

    @property
    def is_alive(self) -> bool:
        return self._current_hp > 0

    @property
    def hp_display(self) -> str:
        return f"{self.name}'s HP: {self._current_hp}/{self._max_hp}"

    def take_physical_damage(self, damage: float, source: Combatant | None = None) -> CombatResult:
        """Mitigate ``damage`` with defense and subtract it from HP."""
        if damage < 0:
            return CombatResult.failure(
                "negative_value", f"(Error) {self.name} cannot take negative damage! ({damage})"
            )
        final_damage = combat_math.physical_damage(damage, self.base_stats.defense)
        self._lose_hp(final_damage)
        attacker = source.name if source is not None else "Something"
        lines = [f"{attacker} attacks {self.name} for {final_damage} damage!"]
        lines.extend(self._hp_lines(source))
        return CombatResult(amount=final_damage, message="\n".join(lines))

    def take_magic_damage(self, damage: float, source: Combatant | None = None) -> CombatResult:
        """Mitigate ``damage`` with magic defense and subtract it from HP."""
        if damage < 0:
            return CombatResult.failure(
                "negative_value", f"(Error) {self.name} cannot take negative magic damage! ({damage})"
            )
        final_damage = combat_math.mitigate(damage, self.base_stats.magic_defense)
        self._lose_hp(final_damage)
        lines = [f"{self.name} takes {final_damage} magic damage!"]
        lines.extend(self._hp_lines(source))
        return CombatResult(amount=final_damage, message="\n".join(lines))

    def heal(self, amount: int) -> CombatResult:
        """Restore up to ``amount`` HP; the returned amount is what was applied."""
        if amount < 0:
            return CombatResult.failure(
                "negative_value", f"(Error) {self.name} cannot heal a negative amount! ({amount})"
            )
        previous = self._current_hp
        self._current_hp = min(self._current_hp + amount, self._max_hp)
        healed = self._current_hp - previous
        message = f"{self.name} healed {healed} HP. HP: {self._current_hp}/{self._max_hp}"
        return CombatResult(amount=healed, message=message)

    def _lose_hp(self, amount: int) -> None:
        self._current_hp = max(self._current_hp - amount, 0)

    def _hp_lines(self, other: Combatant | None) -> list[str]:
        if other is None or other is self:
            return [self.hp_display]
        return [other.hp_display, self.hp_display]
