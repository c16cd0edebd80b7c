import json
from pathlib import Path

import pytest

from voidgame.data.errors import DataLoadError, DataReferenceError, DataValidationError
from voidgame.data.repositories import StoryRepository
from voidgame.domain.monster_catalog import MONSTER_CATALOG


def test_bundled_story_is_reachable_from_start_and_ends() -> None:
    repo = StoryRepository()

    seen: set[str] = set()
    pending = ["start"]
    while pending:
        node = repo.get(pending.pop())
        if node.id in seen:
            continue
        seen.add(node.id)
        if node.monster_id is not None:
            assert node.monster_id in MONSTER_CATALOG
        pending.extend(choice.next_node_id for choice in node.choices)

    assert {"cave_mouth", "forest_path", "ridge", "ending"} <= seen
    assert repo.get("ending").is_ending


def test_story_node_fields_are_parsed(tmp_path: Path) -> None:
    _write_story(
        tmp_path,
        {
            "start": {"text": "Hello", "choices": [{"label": "Fight", "next": "den"}]},
            "den": {"text": "A den.", "pre_battle_text": "Grr!", "monster_id": 2, "is_ending": True},
        },
    )

    den = StoryRepository(base_path=tmp_path).get("den")

    assert den.pre_battle_text == "Grr!"
    assert den.monster_id == 2
    assert den.is_ending
    assert den.choices == []


def test_choice_to_missing_node_raises(tmp_path: Path) -> None:
    _write_story(tmp_path, {"start": {"text": "Hello", "choices": [{"label": "Go", "next": "nowhere"}]}})

    with pytest.raises(DataReferenceError):
        StoryRepository(base_path=tmp_path).get("start")


def test_unknown_monster_id_raises(tmp_path: Path) -> None:
    _write_story(tmp_path, {"start": {"text": "Hello", "monster_id": 999}})

    with pytest.raises(DataReferenceError):
        StoryRepository(base_path=tmp_path).get("start")


def test_malformed_node_raises(tmp_path: Path) -> None:
    _write_story(tmp_path, {"start": {"choices": []}})

    with pytest.raises(DataValidationError):
        StoryRepository(base_path=tmp_path).get("start")


def test_non_boolean_ending_flag_raises(tmp_path: Path) -> None:
    _write_story(tmp_path, {"start": {"text": "Hello", "is_ending": "yes"}})

    with pytest.raises(DataValidationError):
        StoryRepository(base_path=tmp_path).get("start")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError) as excinfo:
        StoryRepository(base_path=tmp_path).get("start")

    assert excinfo.value.path == tmp_path / "story.json"


def test_unknown_node_id_raises_key_error(tmp_path: Path) -> None:
    _write_story(tmp_path, {"start": {"text": "Hello"}})

    with pytest.raises(KeyError):
        StoryRepository(base_path=tmp_path).get("missing")


def _write_story(directory: Path, data: dict[str, object]) -> None:
    (directory / "story.json").write_text(json.dumps(data, indent=2), encoding="utf-8")
