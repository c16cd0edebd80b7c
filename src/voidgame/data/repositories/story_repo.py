"""Repository for story node definitions."""
from __future__ import annotations

from typing import Dict, List, Mapping

from voidgame.data.errors import DataReferenceError, DataValidationError
from voidgame.data.repositories.base import RepositoryBase
from voidgame.domain.defs import MonsterDef, StoryChoiceDef, StoryNodeDef
from voidgame.domain.monster_catalog import MONSTER_CATALOG


class StoryRepository(RepositoryBase[StoryNodeDef]):
    """Loads story nodes and checks that every reference resolves."""

    def __init__(self, base_path=None, *, monster_catalog: Mapping[int, MonsterDef] | None = None) -> None:
        super().__init__("story.json", base_path)
        self._monster_catalog = MONSTER_CATALOG if monster_catalog is None else monster_catalog

    def _build(self, raw: dict[str, object]) -> Dict[str, StoryNodeDef]:
        nodes: Dict[str, StoryNodeDef] = {}
        for node_id, node_payload in raw.items():
            node_data = self._require_mapping(node_payload, f"story node '{node_id}'")
            text = self._require_str(node_data.get("text"), f"story node '{node_id}' text")

            pre_battle_text = None
            if node_data.get("pre_battle_text") is not None:
                pre_battle_text = self._require_str(
                    node_data["pre_battle_text"], f"story node '{node_id}' pre_battle_text"
                )

            monster_id = None
            if node_data.get("monster_id") is not None:
                monster_id = self._require_int(node_data["monster_id"], f"story node '{node_id}' monster_id")
                if monster_id not in self._monster_catalog:
                    raise DataReferenceError(f"story node '{node_id}' references unknown monster id {monster_id}.")

            is_ending = node_data.get("is_ending", False)
            if not isinstance(is_ending, bool):
                raise DataValidationError(f"story node '{node_id}' is_ending must be a boolean.")

            nodes[node_id] = StoryNodeDef(
                id=node_id,
                text=text,
                choices=self._parse_choices(node_data.get("choices"), node_id),
                pre_battle_text=pre_battle_text,
                monster_id=monster_id,
                is_ending=is_ending,
            )
        self._validate_links(nodes)
        return nodes

    def _parse_choices(self, raw_choices: object, node_id: str) -> List[StoryChoiceDef]:
        if raw_choices is None:
            return []
        if not isinstance(raw_choices, list):
            raise DataValidationError(f"story node '{node_id}' choices must be a list if provided.")
        choices: List[StoryChoiceDef] = []
        for index, entry in enumerate(raw_choices):
            choice_ctx = f"story node '{node_id}' choices[{index}]"
            choice_mapping = self._require_mapping(entry, choice_ctx)
            choices.append(
                StoryChoiceDef(
                    label=self._require_str(choice_mapping.get("label"), f"{choice_ctx} label"),
                    next_node_id=self._require_str(choice_mapping.get("next"), f"{choice_ctx} next"),
                )
            )
        return choices

    @staticmethod
    def _validate_links(nodes: Dict[str, StoryNodeDef]) -> None:
        for node in nodes.values():
            for choice in node.choices:
                if choice.next_node_id not in nodes:
                    raise DataReferenceError(f"Invalid next node ID: {choice.next_node_id} (from '{node.id}')")
