import pytest

from src.genwun.errors import RandomSourceError
from src.genwun.utils.rng import LcgRandom, ScriptedRandom, StepRandom, SystemRandom, rand_byte


def test_lcg_is_deterministic():
    first = LcgRandom(1234)
    second = LcgRandom(1234)

    assert [first.randrange(0, 256) for _ in range(50)] == [second.randrange(0, 256) for _ in range(50)]


def test_lcg_advance():
    rng = LcgRandom(0)

    assert rng.advance() == 1013904223
    assert rng.rand16() == ((1013904223 * 1664525 + 1013904223) & 0xFFFFFFFF) >> 16


def test_draws_stay_in_range():
    for rng in (LcgRandom(7), SystemRandom(7), StepRandom(200, 3)):
        for _ in range(500):
            assert 217 <= rng.randrange(217, 256) < 256
            assert 0 <= rand_byte(rng) < 256


def test_step_random_wraps_bytes():
    rng = StepRandom(254, 1)

    assert [rand_byte(rng) for _ in range(4)] == [254, 255, 0, 1]


def test_scripted_random_replays_values():
    rng = ScriptedRandom([3, 0, 255])

    assert rand_byte(rng) == 3
    assert rand_byte(rng) == 0
    assert rng.remaining == 1
    assert rand_byte(rng) == 255

    with pytest.raises(RandomSourceError):
        rand_byte(rng)


def test_scripted_value_must_fit_range():
    rng = ScriptedRandom([100])

    with pytest.raises(RandomSourceError):
        rng.randrange(217, 256)


def test_empty_range_is_rejected():
    with pytest.raises(RandomSourceError):
        LcgRandom(1).randrange(5, 5)
