"""Player model: leveling, experience and spellcasting."""
from __future__ import annotations

from typing import Dict, Iterable, List

from voidgame.domain.defs import SpellDef
from voidgame.domain.results import CombatResult
from voidgame.domain.spell_catalog import STARTING_SPELLS, get_spell
from voidgame.domain.spellcasting import resolve_spell

from .combatant import Combatant
from .monster import Monster
from .stats import StatBlock

DEFAULT_MAX_HP = 300
LEVEL_CAP = 99
MAX_HP_CAP = 9999
HP_PER_LEVEL = 50
STATS_PER_LEVEL = 10
EXP_PER_LEVEL = 10


class Player(Combatant):
    """The player character, persisting across encounters."""

    def __init__(
        self,
        name: str,
        base_stats: StatBlock,
        max_hp: int = DEFAULT_MAX_HP,
        *,
        known_spells: Iterable[str] | None = None,
    ) -> None:
        super().__init__(name, max_hp, base_stats)
        self.level = 1
        self.experience = 0
        self.known_spells: Dict[str, SpellDef] = {}
        for spell_name in STARTING_SPELLS if known_spells is None else known_spells:
            self.learn_spell(spell_name)

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, level={self.level}, hp={self.current_hp}/{self.max_hp})"

    @property
    def exp_threshold(self) -> int:
        return self.level * EXP_PER_LEVEL

    # -----------------------
    # Experience
    # -----------------------
    def gain_experience(self, exp: int) -> CombatResult:
        """Add ``exp`` and level up for every full threshold it covers.

        Once the level cap is reached any leftover experience is kept as is.
        """
        if exp < 0:
            return CombatResult.failure("negative_value", f"(Error) {self.name} cannot receive negative EXP! ({exp})")

        self.experience += exp
        lines: List[str] = [f"{self.name} gained {exp} EXP!", f"Current EXP: {self.experience}"]
        while self.level < LEVEL_CAP and self.experience >= self.exp_threshold:
            self.experience -= self.exp_threshold
            lines.append(self._level_up())
            lines.append(f"Current EXP: {self.experience}")
        return CombatResult(amount=exp, message="\n".join(lines))

    def kill_monster(self, monster: Monster) -> CombatResult:
        """Record a defeated monster and collect its experience."""
        reward = self.gain_experience(monster.exp_given)
        return CombatResult(amount=reward.amount, message=f"{self.name} defeated {monster.name}!\n{reward.message}")

    def _level_up(self) -> str:
        prev_level = self.level
        prev_max_hp = self._max_hp
        stats = self.base_stats
        prev_stats = (stats.strength, stats.defense, stats.magic_attack, stats.magic_defense)

        self.level = min(self.level + 1, LEVEL_CAP)
        self._max_hp = min(self._max_hp + HP_PER_LEVEL, MAX_HP_CAP)
        stats.grow(STATS_PER_LEVEL)

        return "\n".join(
            [
                f"{self.name} leveled up!",
                f"Previous Level: {prev_level}, New Level: {self.level}",
                f"Previous Max HP: {prev_max_hp}, New Max HP: {self._max_hp}",
                f"Previous Strength: {prev_stats[0]}, New Strength: {stats.strength}",
                f"Previous Defense: {prev_stats[1]}, New Defense: {stats.defense}",
                f"Previous Magic Attack: {prev_stats[2]}, New Magic Attack: {stats.magic_attack}",
                f"Previous Magic Defense: {prev_stats[3]}, New Magic Defense: {stats.magic_defense}",
            ]
        )

    # -----------------------
    # Spells
    # -----------------------
    def learn_spell(self, spell_name: str) -> None:
        """Add a catalog spell to the known set; raises KeyError for unknown names."""
        self.known_spells[spell_name] = get_spell(spell_name)

    def knows_spell(self, spell_name: str) -> bool:
        return spell_name in self.known_spells

    def cast_spell(self, spell_name: str, target: Combatant | None = None) -> CombatResult:
        """Cast a known spell. Damage spells need a ``target``; others affect the caster."""
        spell = self.known_spells.get(spell_name)
        if spell is None:
            return CombatResult.failure("unknown_spell", f"(Error) {self.name} does not know the spell '{spell_name}'.")
        return resolve_spell(self, spell, target)
