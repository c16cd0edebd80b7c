"""Shared type aliases for the core and domain layers."""
from typing import Literal

BattleChoice = Literal["A", "D", "M", "R"]
BattleOutcome = Literal["victory", "defeat", "fled"]
EffectKind = Literal["heal", "damage", "buff", "debuff"]
StatusKind = Literal["haste", "protect", "slow", "stop"]
CombatErrorKind = Literal["negative_value", "unknown_spell", "unimplemented_effect"]

__all__ = [
    "BattleChoice",
    "BattleOutcome",
    "CombatErrorKind",
    "EffectKind",
    "StatusKind",
]
