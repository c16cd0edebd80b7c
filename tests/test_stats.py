from voidgame.domain.entities import StatBlock
from voidgame.domain.entities.stats import STAT_CAP


def test_grow_adds_to_every_stat() -> None:
    stats = StatBlock(strength=29, defense=52, magic_attack=35, magic_defense=36)

    stats.grow(10)

    assert (stats.strength, stats.defense, stats.magic_attack, stats.magic_defense) == (39, 62, 45, 46)


def test_grow_clamps_each_stat_independently() -> None:
    stats = StatBlock(strength=995, defense=10, magic_attack=999999, magic_defense=-50)

    stats.grow(10)

    assert stats.strength == STAT_CAP
    assert stats.defense == 20
    assert stats.magic_attack == STAT_CAP
    assert stats.magic_defense == 0


def test_construction_does_not_clamp() -> None:
    stats = StatBlock(strength=999999, defense=-3, magic_attack=0, magic_defense=0)

    assert stats.strength == 999999
    assert stats.defense == -3
