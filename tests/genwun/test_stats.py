import pytest
from pydantic import ValidationError

from src.genwun.enums import Stat, Type
from src.genwun.errors import InvalidStatError
from src.genwun.schema.pokemon import Pokemon
from src.genwun.stats import calc_stat, calc_stat_set, ev_bonus, integer_sqrt
from src.genwun.utils.mon_factory import create_pokemon


def make_mew() -> Pokemon:
    return create_pokemon(100, types=(Type.PSYCHIC,))


def test_isqrt_exact_over_stat_experience_range():
    for n in range(1 << 16):
        root = integer_sqrt(n)
        assert root * root <= n
        assert (root + 1) * (root + 1) > n


def test_mew_stats():
    mew = make_mew()

    assert mew.get_stat(Stat.HP) == 403
    assert mew.get_stat(Stat.SPECIAL) == 298
    assert calc_stat_set(mew) == [403, 298, 298, 298, 298]


def test_default_pokemon_is_perfect_rattata():
    rattata = Pokemon()

    assert rattata.level == 100
    assert rattata.types == (Type.NORMAL,)
    # 63 + 2 * (15 + 30) + 100 + 10
    assert rattata.get_stat(Stat.HP) == 263
    # 63 + 2 * (15 + 72) + 5
    assert rattata.get_stat(Stat.SPEED) == 242


def test_ev_bonus_rounds_up_and_caps():
    assert ev_bonus(0) == 0
    assert ev_bonus(1) == 0
    # ceil(sqrt(9)) = 3 -> 0, ceil(sqrt(10)) = 4 -> 1
    assert ev_bonus(9) == 0
    assert ev_bonus(10) == 1
    assert ev_bonus(65535) == 63


def test_untrained_low_level_stat():
    # (0 + 2 * (0 + 50)) * 10 // 100 + 5
    assert calc_stat(Stat.ATTACK, base=50, iv=0, ev=0, level=10) == 15
    assert calc_stat(Stat.HP, base=50, iv=0, ev=0, level=10) == 30


@pytest.mark.parametrize("stat", [Stat.ACCURACY, Stat.EVASION])
def test_accuracy_and_evasion_have_no_raw_value(stat):
    with pytest.raises(InvalidStatError):
        make_mew().get_stat(stat)


def test_has_type():
    pokemon = create_pokemon(50, types=(Type.NORMAL, Type.FIRE))

    assert pokemon.has_type(Type.NORMAL)
    assert pokemon.has_type(Type.FIRE)
    assert not pokemon.has_type(Type.DRAGON)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"level": 0},
        {"level": 101},
        {"ivs": (16, 15, 15, 15, 15)},
        {"evs": (65536, 0, 0, 0, 0)},
        {"base_stats": (100, 100, 100, 100)},
        {"types": ()},
        {"types": (Type.FIRE, Type.FIRE)},
        {"types": (Type.FIRE, Type.WATER, Type.GRASS)},
    ],
)
def test_out_of_range_records_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        Pokemon(**kwargs)


def test_pokemon_is_immutable():
    mew = make_mew()
    with pytest.raises(ValidationError):
        mew.level = 50
