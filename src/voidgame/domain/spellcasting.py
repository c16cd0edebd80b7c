"""Resolution of spells by effect kind."""
from __future__ import annotations

from typing import TYPE_CHECKING

from voidgame.domain import combat_math
from voidgame.domain.defs import SpellDef
from voidgame.domain.results import CombatResult

if TYPE_CHECKING:
    from voidgame.domain.entities import Combatant, Player


def resolve_spell(caster: Player, spell: SpellDef, target: Combatant | None) -> CombatResult:
    """Dispatch ``spell`` to the resolver for its effect kind."""
    if spell.effect_kind == "heal":
        return _resolve_heal(caster, spell)
    if spell.effect_kind == "damage":
        if target is None:
            raise ValueError(f"Spell '{spell.name}' requires a target.")
        return _resolve_damage(caster, spell, target)
    if spell.effect_kind == "buff":
        return _resolve_buff(caster, spell)
    if spell.effect_kind == "debuff":
        return _resolve_debuff(caster, spell)
    raise ValueError(f"Unknown effect kind: {spell.effect_kind}")


def _resolve_heal(caster: Player, spell: SpellDef) -> CombatResult:
    amount = combat_math.heal_amount(spell.power, caster.level, caster.base_stats.magic_attack)
    healed = caster.heal(amount)
    return CombatResult(amount=healed.amount, message=f"{caster.name} casts {spell.name}!\n{healed.message}")


def _resolve_damage(caster: Player, spell: SpellDef, target: Combatant) -> CombatResult:
    base_damage = combat_math.spell_damage(spell.power, caster.level, caster.base_stats.magic_attack)
    dealt = target.take_magic_damage(base_damage, source=caster)
    return CombatResult(amount=dealt.amount, message=f"{caster.name} casts {spell.name}!\n{dealt.message}")


def _resolve_buff(caster: Player, spell: SpellDef) -> CombatResult:
    if spell.status is None:
        return CombatResult(amount=0, message=f"{caster.name} casts {spell.name}, but nothing happens.")
    caster.status_effects.apply(spell.status, spell.duration)
    message = (
        f"{caster.name} casts {spell.name}! "
        f"{caster.name} is affected by {spell.status} ({spell.duration} rounds)."
    )
    return CombatResult(amount=0, message=message)


def _resolve_debuff(caster: Player, spell: SpellDef) -> CombatResult:
    # TODO: apply spell.status to the target once slow has a turn-order effect.
    return CombatResult.failure(
        "unimplemented_effect", f"{caster.name} casts {spell.name}... but its power has not awakened yet."
    )
