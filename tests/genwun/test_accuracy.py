from src.genwun.accuracy import crit_threshold, hit_threshold, hits, is_critical
from src.genwun.enums import Type
from src.genwun.schema.battle_move import BattleMove, MoveEffect
from src.genwun.schema.battle_state import BattleState
from src.genwun.stat_stages import Modifier
from src.genwun.utils.mon_factory import create_battle_state
from src.genwun.utils.rng import ScriptedRandom, StepRandom


def make_mew() -> BattleState:
    return create_battle_state(100, types=(Type.PSYCHIC,))


def test_struggle_misses_on_255():
    struggle = BattleMove.fallback()
    rng = ScriptedRandom([254, 255])

    assert hits(struggle, rng, Modifier(), Modifier()) is True
    # The 1/256 glitch
    assert hits(struggle, rng, Modifier(), Modifier()) is False


def test_struggle_hit_count_with_stages():
    struggle = BattleMove.fallback()
    rng = StepRandom(0, 1)

    count = sum(hits(struggle, rng, Modifier(stage=-3), Modifier(stage=1)) for _ in range(256))

    # 255 * (40 / 100) / (3 / 2) = 68
    assert count == 68


def test_hit_threshold_truncates_each_step():
    struggle = BattleMove.fallback()

    assert hit_threshold(struggle, Modifier(), Modifier()) == 255
    # 255 * 25 / 100 = 63, 63 / 4 = 15
    assert hit_threshold(struggle, Modifier(stage=-6), Modifier(stage=6)) == 15
    assert hit_threshold(struggle, Modifier(stage=6), Modifier()) == 1020


def test_move_without_accuracy_never_draws():
    swift = BattleMove(power=60, accuracy=None, type=Type.NORMAL)
    rng = ScriptedRandom([])

    assert hits(swift, rng, Modifier(stage=-6), Modifier(stage=6))
    assert rng.remaining == 0


def test_mew_crit_count():
    struggle = BattleMove.fallback()
    mew = make_mew()
    rng = StepRandom(0, 1)

    count = sum(is_critical(struggle, rng, mew) for _ in range(256))

    # Mew has a probability of 50/256 to land a critical hit
    assert count == 50


def test_high_crit_threshold():
    slash = BattleMove(power=70, accuracy=255, effect=MoveEffect.high_crit(), type=Type.NORMAL)
    tackle = BattleMove(power=35, accuracy=242, type=Type.NORMAL)

    assert crit_threshold(slash, 100) == 200
    assert crit_threshold(tackle, 100) == 50
    # Capped to a single byte
    assert crit_threshold(slash, 130) == 255
    assert crit_threshold(tackle, 5) == 2


def test_critical_uses_strict_comparison():
    struggle = BattleMove.fallback()
    mew = make_mew()

    assert is_critical(struggle, ScriptedRandom([49]), mew)
    assert not is_critical(struggle, ScriptedRandom([50]), mew)
