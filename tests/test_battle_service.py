from __future__ import annotations

from typing import Sequence

from tests.helpers.battle_stubs import (
    ScriptedChoices,
    ScriptedRNG,
    make_battle_service,
    make_monster,
    make_player,
)
from voidgame.core.rng import RNG
from voidgame.services import BattleService, CombatLog
from voidgame.services.battle_service import ACTION_PROMPT, SPELL_PROMPT
from voidgame.services.factories import create_monster


class _AlwaysAttack:
    def request_choice(self, prompt: str, valid_options: Sequence[str]) -> str:
        del prompt, valid_options
        return "A"


# -----------------------
# Attack / victory
# -----------------------
def test_attack_that_kills_ends_in_victory_without_monster_turn() -> None:
    service, _, rng, log = make_battle_service(["A"])
    player = make_player()
    slime = make_monster(max_hp=10, exp_given=15)

    report = service.run_encounter(player, slime)

    assert report.outcome == "victory"
    assert report.survived
    assert report.turns == 1
    assert rng.calls == [(3, 8)]
    assert player.current_hp == 300
    assert player.level == 2
    assert player.experience == 5
    assert any("Freya defeated Slime!" in line for line in log.lines)


def test_full_exchange_then_run() -> None:
    service, _, rng, log = make_battle_service(["A", "R"])
    player = make_player()
    monster = make_monster(max_hp=500)

    report = service.run_encounter(player, monster)

    assert report.outcome == "fled"
    assert report.survived
    assert report.turns == 2
    assert monster.current_hp == 465
    assert player.current_hp == 291
    assert rng.calls == [(3, 8), (3, 9)]
    assert "\n--- Turn 2 ---" in log.lines


def test_real_rng_is_reproducible_for_a_seed() -> None:
    outcomes = []
    for _ in range(2):
        player = make_player()
        wolf = create_monster(2)
        service = BattleService(_AlwaysAttack(), CombatLog(writer=None), RNG(42))
        report = service.run_encounter(player, wolf)
        outcomes.append((report.outcome, report.turns, player.current_hp))

    assert outcomes[0] == outcomes[1]
    assert outcomes[0][0] == "victory"


# -----------------------
# Defend / defeat
# -----------------------
def test_defend_halves_monster_damage() -> None:
    service, _, rng, log = make_battle_service(["D", "R"])
    player = make_player()

    service.run_encounter(player, make_monster(max_hp=500))

    assert player.current_hp == 295
    assert rng.calls == [(3, 9)]
    assert "Freya defends!" in log.lines


def test_player_defeat_returns_false() -> None:
    service, _, _, log = make_battle_service(["A"])
    player = make_player(max_hp=5)

    survived = service.battle(player, make_monster(max_hp=500))

    assert survived is False
    assert player.current_hp == 0
    assert "Freya has been defeated!" in log.lines


def test_dead_player_never_enters_combat() -> None:
    service, choices, rng, _ = make_battle_service([])
    player = make_player()
    player.take_physical_damage(99999)

    report = service.run_encounter(player, make_monster())

    assert report.outcome == "defeat"
    assert report.turns == 0
    assert choices.prompts == []
    assert rng.calls == []


# -----------------------
# Prompting
# -----------------------
def test_invalid_choices_reprompt_and_input_is_case_insensitive() -> None:
    service, choices, _, log = make_battle_service(["x", "q", "r"])

    report = service.run_encounter(make_player(), make_monster())

    assert report.outcome == "fled"
    assert choices.remaining == 0
    assert log.lines.count("\nInvalid choice!\n") == 2


def test_keystrokes_are_recorded_but_not_echoed() -> None:
    echoed: list[str] = []
    log = CombatLog(writer=echoed.append)
    service = BattleService(ScriptedChoices(["r"]), log, ScriptedRNG())

    service.run_encounter(make_player(), make_monster())

    assert f"{ACTION_PROMPT}r" in log.lines
    assert f"{ACTION_PROMPT}r" not in echoed
    assert "\nA wild Slime appears!" in echoed


def test_running_grants_zero_exp() -> None:
    service, _, rng, log = make_battle_service(["R"])
    player = make_player()
    monster = make_monster()

    service.run_encounter(player, monster)

    assert any("Freya gained 0 EXP!" in line for line in log.lines)
    assert player.experience == 0
    assert monster.current_hp == monster.max_hp
    assert rng.calls == []


# -----------------------
# Magic
# -----------------------
def test_cancelling_spell_menu_does_not_consume_turn() -> None:
    service, choices, rng, _ = make_battle_service(["M", "0", "R"])

    report = service.run_encounter(make_player(), make_monster())

    assert report.outcome == "fled"
    assert report.turns == 1
    assert rng.calls == []
    assert choices.prompts[1] == (SPELL_PROMPT, ("1", "2", "3", "4", "0"))


def test_invalid_spell_index_reprompts() -> None:
    service, _, _, log = make_battle_service(["M", "9", "0", "R"])

    service.run_encounter(make_player(), make_monster())

    assert log.lines.count("\nInvalid choice!\n") == 1


def test_fire_can_win_the_battle() -> None:
    service, _, rng, _ = make_battle_service(["M", "2"])
    slime = make_monster(max_hp=10)

    report = service.run_encounter(make_player(), slime)

    assert report.outcome == "victory"
    assert slime.current_hp == 0
    assert rng.calls == []


def test_cure_in_battle_then_monster_attacks() -> None:
    service, _, _, _ = make_battle_service(["M", "1", "R"])
    player = make_player()
    player.take_physical_damage(125)

    service.run_encounter(player, make_monster(max_hp=500))

    assert player.current_hp == 251 - 9


def test_slow_does_not_crash_and_turn_continues() -> None:
    service, _, _, log = make_battle_service(["M", "4", "R"])
    player = make_player()

    service.run_encounter(player, make_monster(max_hp=500))

    assert any("has not awakened" in line for line in log.lines)
    assert player.current_hp == 291


# -----------------------
# Haste
# -----------------------
def test_haste_grants_three_consecutive_turns() -> None:
    service, _, rng, log = make_battle_service(["M", "3", "A", "A", "A", "A", "R"])
    player = make_player()
    # defense 255 reduces every physical hit to 1 so the monster survives
    monster = make_monster(max_hp=1000, defense=255)

    report = service.run_encounter(player, monster)

    assert rng.calls == [(3, 9), (3, 8), (3, 8), (3, 8), (3, 8), (3, 9)]
    assert player.current_hp == 300 - 9 - 9
    assert monster.current_hp == 1000 - 4
    assert player.status_effects.haste_rounds_remaining == 0
    assert player.status_effects.extra_turns_pending == 3
    assert log.lines.count("Freya acts again!") == 3
    assert log.lines.count("\n--- Turn 2 ---") == 4
    assert report.turns == 3
