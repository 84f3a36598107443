from math import gcd
from typing import NamedTuple


class Ratio(NamedTuple):
    """Exact non-negative rational, applied with truncating integer math.

    The game never rounds through floating point; every multiplier is a
    numerator/denominator pair applied as (value * num) // den.
    """

    numerator: int
    denominator: int

    def reduced(self) -> "Ratio":
        divisor = gcd(self.numerator, self.denominator) or 1
        return Ratio(self.numerator // divisor, self.denominator // divisor)

    def apply(self, value: int) -> int:
        """floor(value * ratio)"""
        return (value * self.numerator) // self.denominator

    def divide(self, value: int) -> int:
        """floor(value / ratio)"""
        return (value * self.denominator) // self.numerator

    def __mul__(self, other: object) -> "Ratio":  # type: ignore[override]
        if isinstance(other, Ratio):
            return Ratio(self.numerator * other.numerator, self.denominator * other.denominator).reduced()
        if isinstance(other, int):
            return Ratio(self.numerator * other, self.denominator).reduced()
        return NotImplemented

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ratio):
            return self.numerator * other.denominator == other.numerator * self.denominator
        if isinstance(other, int):
            return self.numerator == other * self.denominator
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.reduced()))

    def __repr__(self) -> str:
        return f"Ratio({self.numerator}/{self.denominator})"
