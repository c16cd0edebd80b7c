"""Factory helpers for runtime entities."""

from .monster_factory import create_monster
from .player_factory import DEFAULT_PLAYER_STATS, create_player

__all__ = [
    "DEFAULT_PLAYER_STATS",
    "create_monster",
    "create_player",
]
