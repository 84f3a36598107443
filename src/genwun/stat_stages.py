"""
Stat stage (modifier) system

Implements StatModifierRatios from pokered/data/battle/stat_modifiers.asm.
The negative side is NOT the reciprocal of the positive side: the game
stores percentages, so -1 is 66/100 instead of 2/3, -4 is 33/100, etc.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from src.genwun.constants import MIN_STAT_STAGE, MAX_STAT_STAGE, DEFAULT_STAT_STAGE, MAX_STAT_VALUE
from src.genwun.utils.ratio import Ratio

# StatModifierRatios[stage - MIN_STAT_STAGE] = (numerator, denominator)
STAT_STAGE_RATIOS = [
    Ratio(25, 100),  # -6, MIN_STAT_STAGE
    Ratio(28, 100),  # -5
    Ratio(33, 100),  # -4
    Ratio(40, 100),  # -3
    Ratio(50, 100),  # -2
    Ratio(66, 100),  # -1
    Ratio(2, 2),  #  0, DEFAULT_STAT_STAGE
    Ratio(3, 2),  # +1
    Ratio(4, 2),  # +2
    Ratio(5, 2),  # +3
    Ratio(6, 2),  # +4
    Ratio(7, 2),  # +5
    Ratio(8, 2),  # +6, MAX_STAT_STAGE
]


def clamp_stage(level: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, level))


def combine(stage: int, delta: int) -> int:
    """Add a stage change, saturating at -6 / +6."""
    return clamp_stage(stage + delta)


class Modifier(BaseModel):
    """Stat boost modifier.

    Represents any of the 13 levels of stat boost; 6 levels in either
    direction. Additions saturate at the limits of the boost.
    """

    model_config = ConfigDict(frozen=True)

    stage: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)

    @classmethod
    def from_level(cls, level: int) -> "Modifier":
        """Build a modifier, clamping the level into range."""
        return cls(stage=clamp_stage(level))

    def ratio(self) -> Ratio:
        """Get the ratio of the modifier for this level of boost.

        In RBY this ratio is shared by all stats, accuracy and evasion included.
        """
        return STAT_STAGE_RATIOS[self.stage - MIN_STAT_STAGE]

    def modify(self, stat: int) -> int:
        """Apply the boost to a stat value, capped at 999."""
        return min(self.ratio().apply(stat), MAX_STAT_VALUE)

    def is_neutral(self) -> bool:
        return self.stage == DEFAULT_STAT_STAGE

    def __add__(self, other: Union[int, "Modifier"]) -> "Modifier":
        if isinstance(other, Modifier):
            return Modifier(stage=combine(self.stage, other.stage))
        if isinstance(other, int):
            return Modifier(stage=combine(self.stage, other))
        return NotImplemented

    def __sub__(self, other: int) -> "Modifier":
        if isinstance(other, int):
            return Modifier(stage=combine(self.stage, -other))
        return NotImplemented
