"""Service layer exports."""

from .battle_service import BattleReport, BattleService
from .combat_log import CombatLog
from .errors import FactoryError, UnknownMonsterError
from .story_service import (
    BattleFoughtEvent,
    ChoiceResult,
    StoryEndedEvent,
    StoryNodeView,
    StoryService,
    StorySession,
)

__all__ = [
    "BattleFoughtEvent",
    "BattleReport",
    "BattleService",
    "ChoiceResult",
    "CombatLog",
    "FactoryError",
    "StoryEndedEvent",
    "StoryNodeView",
    "StoryService",
    "StorySession",
    "UnknownMonsterError",
]
