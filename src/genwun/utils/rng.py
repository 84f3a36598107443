import random
from typing import Iterable, Optional, Protocol

from src.genwun.constants import RANDOM_BYTE_RANGE
from src.genwun.errors import RandomSourceError


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [lo, hi)."""

    def randrange(self, lo: int, hi: int) -> int: ...


def rand_byte(rng: RandomSource) -> int:
    """Draw one random byte (0..255), like the game's Random routine."""
    return rng.randrange(0, RANDOM_BYTE_RANGE)


class LcgRandom:
    """Deterministic 32-bit LCG: seed = (seed * 1664525 + 1013904223) mod 2^32

    Draws use the upper 16 bits reduced modulo the range.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def randrange(self, lo: int, hi: int) -> int:
        if hi <= lo:
            raise RandomSourceError(f"Empty range [{lo}, {hi})")
        return lo + self.rand16() % (hi - lo)


class StepRandom:
    """Counter source: each draw returns lo + value % (hi - lo), then value += increment.

    Drawing bytes from StepRandom(0, 1) walks every possible roll exactly once
    per 256 draws.
    """

    def __init__(self, initial: int = 0, increment: int = 1):
        self.value = initial
        self.increment = increment

    def randrange(self, lo: int, hi: int) -> int:
        if hi <= lo:
            raise RandomSourceError(f"Empty range [{lo}, {hi})")
        result = lo + self.value % (hi - lo)
        self.value += self.increment
        return result


class ScriptedRandom:
    """Replays a fixed sequence of draws. Each value must fall in the requested range."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def randrange(self, lo: int, hi: int) -> int:
        if self._position >= len(self._values):
            raise RandomSourceError(f"Scripted source exhausted after {len(self._values)} draws")
        value = self._values[self._position]
        if not lo <= value < hi:
            raise RandomSourceError(f"Scripted value {value} outside [{lo}, {hi}) at draw {self._position}")
        self._position += 1
        return value


class SystemRandom:
    """Non-deterministic source for real battles, optionally seeded for replays."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def randrange(self, lo: int, hi: int) -> int:
        return self._random.randrange(lo, hi)
