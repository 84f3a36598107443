import pytest

from src.genwun.enums import Effectiveness, Type
from src.genwun.type_effectiveness import TYPE_EFFECTIVENESS_CHART, TypeEffectiveness
from src.genwun.utils.ratio import Ratio


@pytest.mark.parametrize(
    "attacking, defending, expected",
    [
        (Type.ICE, Type.FIRE, Effectiveness.NEUTRAL),
        (Type.FIRE, Type.ICE, Effectiveness.WEAK),
        (Type.POISON, Type.BUG, Effectiveness.WEAK),
        (Type.BUG, Type.POISON, Effectiveness.WEAK),
        (Type.GHOST, Type.PSYCHIC, Effectiveness.IMMUNE),
        (Type.GHOST, Type.NORMAL, Effectiveness.IMMUNE),
        (Type.NORMAL, Type.GHOST, Effectiveness.IMMUNE),
        (Type.ELECTRIC, Type.GROUND, Effectiveness.IMMUNE),
        (Type.GROUND, Type.FLYING, Effectiveness.IMMUNE),
        (Type.PSYCHIC, Type.PSYCHIC, Effectiveness.RESIST),
        (Type.DRAGON, Type.DRAGON, Effectiveness.WEAK),
        (Type.WATER, Type.NORMAL, Effectiveness.NEUTRAL),
    ],
)
def test_gen_one_matchups(attacking, defending, expected):
    assert TypeEffectiveness.get_effectiveness(attacking, defending) == expected


@pytest.mark.parametrize(
    "defending, expected",
    [
        (Type.GHOST, Effectiveness.NEUTRAL),
        (Type.BUG, Effectiveness.RESIST),
        (Type.GRASS, Effectiveness.RESIST),
        (Type.POISON, Effectiveness.RESIST),
        (Type.WATER, Effectiveness.WEAK),
    ],
)
def test_grass_matchups(defending, expected):
    assert TypeEffectiveness.get_effectiveness(Type.GRASS, defending) == expected


def test_chart_has_no_duplicate_pairs():
    pairs = [(atk, dfn) for atk, dfn, _ in TYPE_EFFECTIVENESS_CHART]
    assert len(pairs) == len(set(pairs))


def test_chart_is_not_symmetric():
    assert TypeEffectiveness.is_super_effective(Type.FIGHTING, Type.NORMAL)
    assert not TypeEffectiveness.is_super_effective(Type.NORMAL, Type.FIGHTING)


def test_dual_type_ratios_multiply():
    assert TypeEffectiveness.calculate_effectiveness(Type.ICE, (Type.GRASS, Type.FLYING)) == Ratio(4, 1)
    assert TypeEffectiveness.calculate_effectiveness(Type.FIRE, (Type.WATER, Type.ROCK)) == Ratio(1, 4)
    assert TypeEffectiveness.calculate_effectiveness(Type.ELECTRIC, (Type.WATER, Type.DRAGON)) == Ratio(1, 1)
    assert TypeEffectiveness.calculate_effectiveness(Type.GROUND, (Type.ROCK, Type.FLYING)) == Ratio(0, 1)


def test_apply_effectiveness_truncates_after_each_type():
    # 45 * 2 / 2 = 45, but 45 / 2 * 2 = 44
    assert TypeEffectiveness.apply_effectiveness(Type.ELECTRIC, (Type.WATER, Type.DRAGON), 45) == 45
    assert TypeEffectiveness.apply_effectiveness(Type.ELECTRIC, (Type.DRAGON, Type.WATER), 45) == 44
    assert TypeEffectiveness.apply_effectiveness(Type.GHOST, (Type.PSYCHIC,), 100) == 0
