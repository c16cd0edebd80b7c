"""Domain definition exports."""

from .monster_def import MonsterDef
from .spell_def import SpellDef
from .story_def import StoryChoiceDef, StoryNodeDef

__all__ = [
    "MonsterDef",
    "SpellDef",
    "StoryChoiceDef",
    "StoryNodeDef",
]
