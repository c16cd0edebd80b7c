"""Runtime entity exports."""

from .combatant import Combatant
from .monster import Monster
from .player import Player
from .stats import StatBlock

__all__ = [
    "Combatant",
    "Monster",
    "Player",
    "StatBlock",
]
