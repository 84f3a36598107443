from enum import IntEnum

from src.genwun.constants import STAT_HP, STAT_ATK, STAT_DEF, STAT_SPECIAL, STAT_SPEED, STAT_ACC, STAT_EVASION, NUM_STATS


class Stat(IntEnum):
    """Stat indexes. The value is the slot in a StatSet / stage array."""

    HP = STAT_HP
    ATTACK = STAT_ATK
    DEFENSE = STAT_DEF
    SPECIAL = STAT_SPECIAL
    SPEED = STAT_SPEED
    # Battle-only, never stored as raw values
    ACCURACY = STAT_ACC
    EVASION = STAT_EVASION

    @property
    def has_raw_value(self) -> bool:
        return self.value < NUM_STATS
