"""Static table of every spell in the game."""
from __future__ import annotations

from typing import Dict, Tuple

from voidgame.domain.defs import SpellDef
from voidgame.domain.status_effects import HASTE_DURATION

SPELL_CATALOG: Dict[str, SpellDef] = {
    "Cure": SpellDef(name="Cure", effect_kind="heal", power=10, cost=4),
    "Fire": SpellDef(name="Fire", effect_kind="damage", power=12, cost=5),
    "Haste": SpellDef(name="Haste", effect_kind="buff", power=0, cost=8, status="haste", duration=HASTE_DURATION),
    "Slow": SpellDef(name="Slow", effect_kind="debuff", power=0, cost=6, status="slow", duration=3),
}

STARTING_SPELLS: Tuple[str, ...] = ("Cure", "Fire", "Haste", "Slow")


def get_spell(name: str) -> SpellDef:
    """Return the spell called ``name``; raises KeyError when it does not exist."""
    try:
        return SPELL_CATALOG[name]
    except KeyError as exc:
        raise KeyError(name) from exc
