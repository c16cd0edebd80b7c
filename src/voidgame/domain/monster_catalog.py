"""Static table of monster templates keyed by catalog id."""
from __future__ import annotations

from typing import Dict

from voidgame.domain.defs import MonsterDef

MONSTER_CATALOG: Dict[int, MonsterDef] = {
    1: MonsterDef(id=1, name="Bat", max_hp=150, exp_given=5, strength=5, defense=6, magic_attack=4, magic_defense=5),
    2: MonsterDef(id=2, name="Wolf", max_hp=150, exp_given=7, strength=6, defense=7, magic_attack=8, magic_defense=9),
    3: MonsterDef(
        id=3, name="Wyvern", max_hp=300, exp_given=20, strength=18, defense=20, magic_attack=15, magic_defense=16
    ),
}
