"""Factory for creating monster instances from catalog templates."""
from __future__ import annotations

from typing import Mapping

from voidgame.domain.defs import MonsterDef
from voidgame.domain.entities import Monster, StatBlock
from voidgame.domain.monster_catalog import MONSTER_CATALOG
from voidgame.services.errors import UnknownMonsterError


def create_monster(monster_id: int, catalog: Mapping[int, MonsterDef] | None = None) -> Monster:
    """Instantiate a fresh monster for one encounter."""
    templates = MONSTER_CATALOG if catalog is None else catalog
    try:
        template = templates[monster_id]
    except KeyError as exc:
        raise UnknownMonsterError(monster_id) from exc

    stats = StatBlock(
        strength=template.strength,
        defense=template.defense,
        magic_attack=template.magic_attack,
        magic_defense=template.magic_defense,
    )
    return Monster(
        name=template.name,
        max_hp=template.max_hp,
        exp_given=template.exp_given,
        base_stats=stats,
        monster_id=template.id,
    )
