"""Console-driven UI loops for Void."""
from __future__ import annotations

import secrets
from typing import Dict, List, Literal

from voidgame.core.rng import RNG
from voidgame.data.repositories import StoryRepository
from voidgame.services import (
    BattleFoughtEvent,
    BattleService,
    CombatLog,
    StoryEndedEvent,
    StoryService,
    StorySession,
)
from voidgame.services.factories import create_player
from voidgame.services.story_service import StoryEvent

from .config import load_config, save_config
from .console import ConsoleChoiceSource
from .render import debug_enabled, render_combat_log, render_node

MenuAction = Literal["new_game", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Start the interactive CLI session; closing stdin quits cleanly."""
    config = load_config()
    print("\nWelcome to Void.")
    try:
        while True:
            action = _main_menu_loop()
            if action == "quit":
                break
            if action == "options":
                _options_menu(config)
            else:
                _play(config)
    except EOFError:
        print("\nInput closed.")
    print("Goodbye!")


def _main_menu_loop() -> MenuAction:
    while True:
        print()
        print("Main Menu")
        print("1. New Game")
        print("2. Options")
        print("3. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "options"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _options_menu(config: Dict[str, bool]) -> None:
    while True:
        show_log = config.get("show_combat_log", True)
        print()
        print("Options")
        print(f"1. Show combat log after battles: {'On' if show_log else 'Off'}")
        print("2. Back")
        choice = input("Select an option: ").strip()
        if choice == "1":
            config["show_combat_log"] = not show_log
            save_config(config)
            print(f"Combat log {'enabled' if config['show_combat_log'] else 'disabled'}.")
        elif choice == "2":
            return
        else:
            print("Invalid selection. Please enter 1 or 2.")


def _play(config: Dict[str, bool]) -> None:
    seed = _prompt_seed()
    player = create_player(_prompt_player_name())
    print(f"Game started with seed: {seed}")

    combat_log = CombatLog(print, echo_records=debug_enabled())
    battle_service = BattleService(ConsoleChoiceSource(), combat_log, RNG(seed))
    story_service = StoryService(StoryRepository(), battle_service, combat_log)

    session, events = story_service.start(player)
    _handle_events(events, combat_log, config)
    _run_story_loop(story_service, session, combat_log, config)


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_player_name() -> str:
    name = input("Enter hero name (default Hero): ").strip()
    return name or "Hero"


def _run_story_loop(
    story_service: StoryService, session: StorySession, combat_log: CombatLog, config: Dict[str, bool]
) -> None:
    while True:
        view = story_service.get_node_view(session)
        print()
        for line in render_node(view.node_id, view.text, view.choices, show_id=debug_enabled()):
            print(line)
        if session.is_over:
            if session.player_defeated:
                print("\nYour journey ends here. Returning to main menu.")
            else:
                print("\nThe End. Returning to main menu.")
            return
        choice_index = _prompt_choice(len(view.choices))
        result = story_service.choose(session, choice_index)
        _handle_events(result.events, combat_log, config)


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _handle_events(events: List[StoryEvent], combat_log: CombatLog, config: Dict[str, bool]) -> None:
    for event in events:
        if isinstance(event, BattleFoughtEvent):
            if config.get("show_combat_log", True):
                print(render_combat_log(combat_log.lines))
            combat_log.clear()
            if event.survived:
                print(f"You survived the encounter with the {event.monster_name}.")
        elif isinstance(event, StoryEndedEvent) and event.player_defeated:
            print("You have fallen.")
