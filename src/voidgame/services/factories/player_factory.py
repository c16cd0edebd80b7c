"""Factory for creating the player character."""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from voidgame.domain.entities import Player, StatBlock
from voidgame.domain.entities.player import DEFAULT_MAX_HP

DEFAULT_PLAYER_STATS = StatBlock(strength=29, defense=52, magic_attack=35, magic_defense=36)


def create_player(
    name: str,
    stats: StatBlock | None = None,
    *,
    max_hp: int = DEFAULT_MAX_HP,
    known_spells: Iterable[str] | None = None,
) -> Player:
    """Build a level 1 player; stats default to the starting hero's."""
    base = stats if stats is not None else DEFAULT_PLAYER_STATS
    owned = replace(base)  # never share a stat block between players
    return Player(name=name, base_stats=owned, max_hp=max_hp, known_spells=known_spells)
