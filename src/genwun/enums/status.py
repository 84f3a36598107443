from enum import IntFlag

from src.genwun.constants import MAX_SLEEP_TURNS
from src.genwun.errors import InvalidConditionError

# Low 3 bits of the status byte hold the remaining sleep turns
SLEEP_MASK = 0b111


class Condition(IntFlag):
    """Non-volatile status condition - layout of pokered's status byte (wBattleMonStatus)

    The game keeps "badly poisoned" outside of this byte, in a volatile battle
    flag. It is folded in here as TOXIC so a single value describes the
    condition, and it is dropped again whenever the battler is restored.
    """

    NONE = 0
    SLEEP = SLEEP_MASK  # Number of turns to sleep
    POISON = 1 << 3
    BURN = 1 << 4
    FREEZE = 1 << 5
    PARALYSIS = 1 << 6
    TOXIC = 1 << 7  # Only valid together with POISON

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def create_sleep(cls, turns: int) -> "Condition":
        """Asleep with the given number of turns remaining (1-7)"""
        if not 1 <= turns <= MAX_SLEEP_TURNS:
            raise InvalidConditionError(f"Sleep turns must be 1-{MAX_SLEEP_TURNS}, got {turns}")
        return cls(turns)

    @classmethod
    def create_poison(cls, is_bad: bool = False) -> "Condition":
        if is_bad:
            return cls.POISON | cls.TOXIC
        return cls.POISON

    @classmethod
    def create_burn(cls) -> "Condition":
        return cls.BURN

    @classmethod
    def create_freeze(cls) -> "Condition":
        return cls.FREEZE

    @classmethod
    def create_paralysis(cls) -> "Condition":
        return cls.PARALYSIS

    # =========================================================================
    # SLEEP COUNTER METHODS
    # =========================================================================

    def get_sleep_turns(self) -> int:
        """Get remaining sleep turns (0-7)"""
        return int(self) & SLEEP_MASK

    def decrement_sleep(self) -> "Condition":
        """Decrement sleep counter by 1. Reaching 0 wakes the Pokemon up."""
        current = self.get_sleep_turns()
        return Condition((int(self) & ~SLEEP_MASK) | max(0, current - 1))

    # =========================================================================
    # STATUS CHECK METHODS
    # =========================================================================

    def is_asleep(self) -> bool:
        return self.get_sleep_turns() > 0

    def is_poisoned(self) -> bool:
        """Regular or bad poison"""
        return bool(self & Condition.POISON)

    def is_badly_poisoned(self) -> bool:
        return bool(self & Condition.TOXIC)

    def is_burned(self) -> bool:
        return bool(self & Condition.BURN)

    def is_frozen(self) -> bool:
        return bool(self & Condition.FREEZE)

    def is_paralyzed(self) -> bool:
        return bool(self & Condition.PARALYSIS)

    def validate(self) -> "Condition":
        """Check that at most one condition is set, returning self."""
        active = [self.is_asleep(), self.is_poisoned(), self.is_burned(), self.is_frozen(), self.is_paralyzed()]
        if sum(active) > 1:
            raise InvalidConditionError(f"At most one condition may be active, got {self!r}")
        if self.is_badly_poisoned() and not self.is_poisoned():
            raise InvalidConditionError("Bad poison requires the poison bit")
        return self

    # =========================================================================
    # STATUS MODIFICATION METHODS
    # =========================================================================

    def downgrade_toxic(self) -> "Condition":
        """Turn bad poison into regular poison; other conditions are unchanged."""
        return Condition(int(self) & ~Condition.TOXIC)
