"""Spell definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from voidgame.core.types import EffectKind, StatusKind


@dataclass(frozen=True, slots=True)
class SpellDef:
    """Describes a castable spell.

    ``cost`` is informational only: there is no mana pool to deduct it from.
    ``status`` and ``duration`` are only meaningful for buff and debuff spells.
    """

    name: str
    effect_kind: EffectKind
    power: int
    cost: int
    status: StatusKind | None = None
    duration: int = 0
