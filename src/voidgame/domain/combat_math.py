"""Damage, mitigation and healing formulas.

Every function here is pure: callers own validation of game state and the
application of results. Inputs that can never be valid (negative damage or
power) raise ValueError.
"""
from __future__ import annotations

DAMAGE_CAP = 9999
MITIGATION_BASE = 255.0
MITIGATION_DIVISOR = 256
SPELL_POWER_MULTIPLIER = 4
HEAL_SCALING = 10
MAGIC_DIVISOR = 32


def clamp_damage(value: int) -> int:
    """Clamp a computed damage or heal value to [0, DAMAGE_CAP]."""
    return max(0, min(value, DAMAGE_CAP))


def mitigation_factor(defense: int) -> float:
    """Return the multiplicative reduction applied for ``defense``."""
    return (MITIGATION_BASE - defense) / MITIGATION_DIVISOR


def mitigate(incoming: float, defense: int) -> int:
    """Apply the mitigation formula shared by physical and magic damage."""
    _require_non_negative(incoming, "Incoming damage")
    return clamp_damage(round(incoming * mitigation_factor(defense) + 1))


def physical_damage(incoming: float, target_defense: int) -> int:
    """Final physical damage dealt to a target with ``target_defense``."""
    return mitigate(incoming, target_defense)


def incoming_physical_damage(base_damage: int, *, defending: bool) -> float:
    """Return the attacker's rolled damage, halved when the target defends."""
    if defending:
        return base_damage / 2.0
    return float(base_damage)


def heal_amount(spell_power: int, level: int, magic_attack: int) -> int:
    """Return the HP restored by a healing spell (before overheal clamping)."""
    _require_non_negative(spell_power, "Spell power")
    raw = spell_power * SPELL_POWER_MULTIPLIER + level * magic_attack * HEAL_SCALING / MAGIC_DIVISOR
    return clamp_damage(round(raw))


def spell_damage(spell_power: int, level: int, magic_attack: int) -> int:
    """Return the unmitigated damage of an offensive spell."""
    _require_non_negative(spell_power, "Spell power")
    raw = spell_power * SPELL_POWER_MULTIPLIER + level * magic_attack * spell_power / MAGIC_DIVISOR
    return max(0, round(raw))


def magic_damage(spell_power: int, level: int, magic_attack: int, target_magic_defense: int) -> int:
    """Final magic damage after the target's magic defense is applied."""
    return mitigate(spell_damage(spell_power, level, magic_attack), target_magic_defense)


def _require_non_negative(value: float, label: str) -> None:
    if value < 0:
        raise ValueError(f"{label} cannot be negative ({value}).")
