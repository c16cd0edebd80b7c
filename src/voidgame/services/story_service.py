"""Story progression service."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from voidgame.data.repositories import StoryRepository
from voidgame.domain.defs import StoryNodeDef
from voidgame.domain.entities import Monster, Player
from voidgame.services.battle_service import BattleService
from voidgame.services.factories import create_monster
from voidgame.services.ports import BattleLogger

MonsterFactory = Callable[[int], Monster]


@dataclass(slots=True)
class StorySession:
    """Where one playthrough currently stands."""

    player: Player
    current_node_id: str
    is_over: bool = False
    player_defeated: bool = False


@dataclass(slots=True)
class StoryNodeView:
    """Data returned to the presentation layer for rendering."""

    node_id: str
    text: str
    choices: List[str]
    is_ending: bool


@dataclass(slots=True)
class StoryEvent:
    """Base class for story events."""


@dataclass(slots=True)
class BattleFoughtEvent(StoryEvent):
    node_id: str
    monster_name: str
    survived: bool


@dataclass(slots=True)
class StoryEndedEvent(StoryEvent):
    node_id: str
    player_defeated: bool


@dataclass(slots=True)
class ChoiceResult:
    """Result returned after applying a choice."""

    events: List[StoryEvent] = field(default_factory=list)
    node_view: StoryNodeView | None = None


class StoryService:
    """Walks the story graph and hands encounters to the battle engine."""

    def __init__(
        self,
        story_repo: StoryRepository,
        battle_service: BattleService,
        log: BattleLogger,
        *,
        monster_factory: MonsterFactory = create_monster,
        start_node_id: str = "start",
    ) -> None:
        self._story_repo = story_repo
        self._battle_service = battle_service
        self._log = log
        self._monster_factory = monster_factory
        self._start_node_id = start_node_id

    def start(self, player: Player) -> tuple[StorySession, List[StoryEvent]]:
        """Create a session positioned at the start node."""
        session = StorySession(player=player, current_node_id=self._start_node_id)
        events = self._enter_node(session, self._start_node_id)
        return session, events

    def get_node_view(self, session: StorySession) -> StoryNodeView:
        node = self._story_repo.get(session.current_node_id)
        return StoryNodeView(
            node_id=node.id,
            text=node.text,
            choices=[choice.label for choice in node.choices] if not session.is_over else [],
            is_ending=node.is_ending,
        )

    def choose(self, session: StorySession, choice_index: int) -> ChoiceResult:
        """Follow the choice at ``choice_index`` from the current node."""
        if session.is_over:
            raise ValueError("The story is already over.")
        node = self._story_repo.get(session.current_node_id)
        if not 0 <= choice_index < len(node.choices):
            raise ValueError(f"Choice index {choice_index} out of range for node '{node.id}'.")
        events = self._enter_node(session, node.choices[choice_index].next_node_id)
        return ChoiceResult(events=events, node_view=self.get_node_view(session))

    def _enter_node(self, session: StorySession, node_id: str) -> List[StoryEvent]:
        node = self._story_repo.get(node_id)
        session.current_node_id = node.id
        events: List[StoryEvent] = []

        if node.monster_id is not None:
            monster, survived = self._run_battle(session, node)
            events.append(BattleFoughtEvent(node_id=node.id, monster_name=monster.name, survived=survived))
            if not survived:
                session.is_over = True
                session.player_defeated = True
                events.append(StoryEndedEvent(node_id=node.id, player_defeated=True))
                return events

        if node.is_ending or not node.choices:
            session.is_over = True
            events.append(StoryEndedEvent(node_id=node.id, player_defeated=False))
        return events

    def _run_battle(self, session: StorySession, node: StoryNodeDef) -> tuple[Monster, bool]:
        assert node.monster_id is not None
        if node.pre_battle_text:
            self._log.log(node.pre_battle_text)
        monster = self._monster_factory(node.monster_id)
        return monster, self._battle_service.battle(session.player, monster)
