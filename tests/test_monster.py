import pytest

from tests.helpers.battle_stubs import make_player
from voidgame.domain.entities import Monster, StatBlock
from voidgame.domain.combat_math import DAMAGE_CAP
from voidgame.services.factories import create_monster


def test_monster_starts_at_full_hp() -> None:
    bat = create_monster(1)

    assert bat.current_hp == bat.max_hp == 150


def test_monster_takes_mitigated_damage() -> None:
    bat = create_monster(1)

    bat.take_physical_damage(5, make_player())

    assert bat.current_hp == 144


def test_multiple_hits_reduce_hp() -> None:
    wolf = create_monster(2)
    player = make_player()

    wolf.take_physical_damage(5, player)
    wolf.take_physical_damage(5, player)

    assert wolf.current_hp == 138


def test_lethal_hit_stops_at_zero() -> None:
    bat = create_monster(1)

    bat.take_physical_damage(153, make_player())

    assert bat.current_hp == 0
    assert not bat.is_alive


def test_damage_over_cap_is_clamped() -> None:
    bat = create_monster(1)

    result = bat.take_physical_damage(999999, make_player())

    assert result.amount == DAMAGE_CAP


def test_negative_damage_leaves_hp_alone() -> None:
    wolf = create_monster(2)

    result = wolf.take_physical_damage(-999999, make_player())

    assert result.error == "negative_value"
    assert wolf.current_hp == 150


def test_monster_heal_is_clamped() -> None:
    wolf = create_monster(2)
    wolf.take_physical_damage(20)

    wolf.heal(500)

    assert wolf.current_hp == wolf.max_hp


def test_invalid_construction_values_raise() -> None:
    stats = StatBlock(strength=1, defense=1, magic_attack=1, magic_defense=1)

    with pytest.raises(ValueError):
        Monster("Ghost", 0, 5, stats)
    with pytest.raises(ValueError):
        Monster("Ghost", 10, -1, stats)
