"""Turn-based battle engine for one player against one monster."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from voidgame.core.rng import RNG
from voidgame.core.types import BattleChoice, BattleOutcome
from voidgame.domain import combat_math
from voidgame.domain.defs import SpellDef
from voidgame.domain.entities import Monster, Player
from voidgame.services.ports import BattleLogger, ChoiceSource

PLAYER_ROLL: Tuple[int, int] = (3, 8)
MONSTER_ROLL: Tuple[int, int] = (3, 9)

ACTION_PROMPT = "Attack (A), Defend (D), Magic (M), or Run (R)? "
ACTION_OPTIONS: Tuple[BattleChoice, ...] = ("A", "D", "M", "R")
SPELL_PROMPT = "Choose a spell (0 to cancel): "
CANCEL_OPTION = "0"


@dataclass(frozen=True, slots=True)
class BattleReport:
    """How an encounter ended and how many exchanges it took."""

    outcome: BattleOutcome
    turns: int

    @property
    def survived(self) -> bool:
        # Fleeing counts as surviving; callers that need the difference read ``outcome``.
        return self.outcome != "defeat"


class BattleService:
    """Runs the encounter loop: prompt, resolve, monster turn, repeat.

    Player input comes from ``choices`` and every line of output goes to
    ``log``. All random rolls come from ``rng``.
    """

    def __init__(self, choices: ChoiceSource, log: BattleLogger, rng: RNG) -> None:
        self._choices = choices
        self._log = log
        self._rng = rng

    # -----------------------
    # Entry points
    # -----------------------
    def battle(self, player: Player, monster: Monster) -> bool:
        """Fight ``monster`` and return whether the player is still standing."""
        return self.run_encounter(player, monster).survived

    def run_encounter(self, player: Player, monster: Monster) -> BattleReport:
        """Run the turn loop to completion and return the full outcome.

        Haste is checked as each player action begins, so the turn Haste is
        cast on is not itself hasted: the monster still answers it, and the
        following actions each skip the monster's turn while rounds remain.
        """
        if not player.is_alive:
            self._log.log(f"{player.name} is in no condition to fight.")
            return BattleReport(outcome="defeat", turns=0)

        self._log.log(f"\nA wild {monster.name} appears!")
        self._log.log(player.hp_display)
        self._log.log(f"{monster.hp_display}\n")

        turn = 1
        while monster.is_alive:
            self._log.log(f"\n--- Turn {turn} ---")
            hasted = player.status_effects.haste_rounds_remaining > 0
            choice, spell = self._prompt_action(player)

            if choice == "R":
                return self._flee(player, monster, turn)

            self._resolve_player_action(player, monster, choice, spell)
            if not monster.is_alive:
                self._log.log(player.kill_monster(monster).message)
                return BattleReport(outcome="victory", turns=turn)

            if hasted and player.status_effects.consume_round("haste"):
                self._log.log(f"{player.name} acts again!")
                continue

            self._monster_turn(player, monster, defending=choice == "D")
            if not player.is_alive:
                self._log.log(f"{player.name} has been defeated!")
                return BattleReport(outcome="defeat", turns=turn)
            turn += 1

        return BattleReport(outcome="victory", turns=turn - 1)

    # -----------------------
    # Prompts
    # -----------------------
    def _prompt_action(self, player: Player) -> tuple[BattleChoice, SpellDef | None]:
        while True:
            choice = self._request(ACTION_PROMPT, ACTION_OPTIONS)
            if choice != "M":
                return choice, None
            spell = self._prompt_spell(player)
            if spell is not None:
                return "M", spell
            self._log.log(f"{player.name} closes the spellbook.")

    def _prompt_spell(self, player: Player) -> SpellDef | None:
        spells = list(player.known_spells.values())
        if not spells:
            self._log.log(f"{player.name} does not know any spells.")
            return None
        for index, spell in enumerate(spells, start=1):
            self._log.log(f"  {index}. {spell.name} ({spell.effect_kind}, cost {spell.cost})")
        self._log.log(f"  {CANCEL_OPTION}. Cancel")
        options = tuple(str(index) for index in range(1, len(spells) + 1)) + (CANCEL_OPTION,)
        selection = self._request(SPELL_PROMPT, options)
        if selection == CANCEL_OPTION:
            return None
        return spells[int(selection) - 1]

    def _request(self, prompt: str, options: Tuple[str, ...]) -> str:
        while True:
            raw = self._choices.request_choice(prompt, options)
            self._log.record(f"{prompt}{raw}")
            normalized = raw.strip().upper()
            if normalized in options:
                return normalized
            self._log.log("\nInvalid choice!\n")

    # -----------------------
    # Resolution
    # -----------------------
    def _resolve_player_action(
        self, player: Player, monster: Monster, choice: BattleChoice, spell: SpellDef | None
    ) -> None:
        if choice == "A":
            damage = self._rng.roll(*PLAYER_ROLL) + player.base_stats.strength
            self._log.log(monster.take_physical_damage(damage, source=player).message)
        elif choice == "D":
            self._log.log(f"{player.name} defends!")
        elif choice == "M":
            assert spell is not None
            self._log.log(player.cast_spell(spell.name, target=monster).message)
        else:
            raise ValueError(f"Unknown battle choice: {choice}")

    def _monster_turn(self, player: Player, monster: Monster, *, defending: bool) -> None:
        base_damage = self._rng.roll(*MONSTER_ROLL) + monster.base_stats.strength
        incoming = combat_math.incoming_physical_damage(base_damage, defending=defending)
        self._log.log(player.take_physical_damage(incoming, source=monster).message)

    def _flee(self, player: Player, monster: Monster, turn: int) -> BattleReport:
        self._log.log(f"{player.name} runs away from {monster.name}!")
        self._log.log(player.gain_experience(0).message)
        return BattleReport(outcome="fled", turns=turn)
