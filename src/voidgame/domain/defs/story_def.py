"""Story definition structures used by the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class StoryChoiceDef:
    """Represents a selectable choice on a story node."""

    label: str
    next_node_id: str


@dataclass(slots=True)
class StoryNodeDef:
    """Fully parsed story node."""

    id: str
    text: str
    choices: List[StoryChoiceDef] = field(default_factory=list)
    pre_battle_text: str | None = None
    monster_id: int | None = None
    is_ending: bool = False
