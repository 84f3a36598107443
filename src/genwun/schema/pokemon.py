from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.genwun.constants import MIN_LEVEL, MAX_LEVEL, MAX_BASE_STAT, MAX_PER_STAT_IVS, MAX_PER_STAT_EVS, NUM_STATS
from src.genwun.enums import Stat, Type
from src.genwun.stats import PERFECT_EVS, PERFECT_IVS, calc_raw_stat

BaseStat = Annotated[int, Field(ge=0, le=MAX_BASE_STAT)]  # u8
IndividualValue = Annotated[int, Field(ge=0, le=MAX_PER_STAT_IVS)]  # 4-bit DV
EffortValue = Annotated[int, Field(ge=0, le=MAX_PER_STAT_EVS)]  # u16 stat experience

# Rattata
DEFAULT_BASE_STATS = (30, 56, 35, 25, 72)


class Pokemon(BaseModel):
    """Pokemon record as it enters a battle. Never mutated during the battle.

    The default Pokemon has the base stats and type of Rattata, perfect IVs
    and EVs, and is at level 100. Override as needed.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(default=MAX_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)  # u8
    # Ordered HP, Attack, Defense, Special, Speed
    base_stats: tuple[BaseStat, ...] = Field(default=DEFAULT_BASE_STATS, min_length=NUM_STATS, max_length=NUM_STATS)
    ivs: tuple[IndividualValue, ...] = Field(default=PERFECT_IVS, min_length=NUM_STATS, max_length=NUM_STATS)
    evs: tuple[EffortValue, ...] = Field(default=PERFECT_EVS, min_length=NUM_STATS, max_length=NUM_STATS)
    types: tuple[Type, ...] = Field(default=(Type.NORMAL,), min_length=1, max_length=2)

    @field_validator("types")
    @classmethod
    def _types_are_distinct(cls, types: tuple[Type, ...]) -> tuple[Type, ...]:
        if len(set(types)) != len(types):
            raise ValueError(f"Pokemon types must be distinct, got {[t.name for t in types]}")
        return types

    def get_stat(self, stat: Stat) -> int:
        """Raw, unmodified stat based on level, base stats, EVs and IVs."""
        return calc_raw_stat(self, stat)

    def has_type(self, wanted: Type) -> bool:
        return wanted in self.types

    def get_types(self) -> tuple[Type, ...]:
        return self.types
