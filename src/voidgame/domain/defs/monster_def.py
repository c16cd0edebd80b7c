"""Monster template structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MonsterDef:
    """Static template a monster instance is built from."""

    id: int
    name: str
    max_hp: int
    exp_given: int
    strength: int
    defense: int
    magic_attack: int
    magic_defense: int
