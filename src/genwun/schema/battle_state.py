from typing import Callable

from pydantic import BaseModel, Field, field_validator

from src.genwun.constants import NUM_STATS, NUM_BATTLE_STATS
from src.genwun.enums import Condition, Stat
from src.genwun.errors import InvalidStatError
from src.genwun.schema.pokemon import Pokemon
from src.genwun.stat_stages import Modifier
from src.genwun.stats import StatSet, calc_stat_set


class NonVolatileState(BaseModel):
    """Battler data that survives being switched out: HP and status condition"""

    pokemon: Pokemon
    hit_points: int = Field(ge=0, le=65535)  # u16
    condition: Condition = Condition.NONE

    @field_validator("condition")
    @classmethod
    def _single_condition(cls, condition: Condition) -> Condition:
        return Condition(condition).validate()

    @classmethod
    def new(cls, pokemon: Pokemon) -> "NonVolatileState":
        """Fresh state: full HP, no condition."""
        return cls(pokemon=pokemon, hit_points=pokemon.get_stat(Stat.HP))


class BattleState(BaseModel):
    """Per-battler state while the Pokemon is on the field.

    Wraps the non-volatile state with the cached raw stats and the stage
    modifiers for the 5 combat stats plus Accuracy and Evasion. Stages are
    lost when the battler leaves the field, see snapshot() and restore().
    """

    nv_state: NonVolatileState
    stats: StatSet = Field(min_length=NUM_STATS, max_length=NUM_STATS)
    modifiers: list[Modifier] = Field(
        default_factory=lambda: [Modifier() for _ in range(NUM_BATTLE_STATS)],
        min_length=NUM_BATTLE_STATS,
        max_length=NUM_BATTLE_STATS,
    )

    @classmethod
    def new(cls, pokemon: Pokemon) -> "BattleState":
        return cls.restore(NonVolatileState.new(pokemon))

    @classmethod
    def restore(cls, nv_state: NonVolatileState) -> "BattleState":
        """Send a Pokemon back in from its saved non-volatile state.

        Stats are recomputed, stages start neutral, and bad poison is turned
        into regular poison. The given snapshot is not modified.
        """
        nv_state = nv_state.model_copy(update={"condition": nv_state.condition.downgrade_toxic()})
        return cls(nv_state=nv_state, stats=calc_stat_set(nv_state.pokemon))

    def snapshot(self) -> NonVolatileState:
        """Non-volatile state to keep when this battler is switched out."""
        return self.nv_state.model_copy()

    # =========================================================================
    # NON-VOLATILE STATE
    # =========================================================================

    @property
    def pokemon(self) -> Pokemon:
        return self.nv_state.pokemon

    @property
    def hit_points(self) -> int:
        return self.nv_state.hit_points

    @property
    def max_hit_points(self) -> int:
        return self.stats[Stat.HP]

    @property
    def condition(self) -> Condition:
        return self.nv_state.condition

    def set_condition(self, condition: Condition) -> None:
        self.nv_state.condition = Condition(condition).validate()

    def is_alive(self) -> bool:
        return self.nv_state.hit_points > 0

    def damage(self, amount: int) -> int:
        """Take damage, saturating at 0 HP. Returns the remaining HP."""
        self.nv_state.hit_points = max(0, self.nv_state.hit_points - amount)
        return self.nv_state.hit_points

    # =========================================================================
    # STATS AND STAGES
    # =========================================================================

    def __getitem__(self, stat: Stat) -> int:
        """Raw value of a combat stat. Accuracy and Evasion have no raw value."""
        if not Stat(stat).has_raw_value:
            raise InvalidStatError(Stat(stat).name)
        return self.stats[stat]

    def modified_stat(self, stat: Stat) -> int:
        """Combat stat with its stage applied, capped at 999."""
        return self.get_modifier(stat).modify(self[stat])

    def get_modifier(self, stat: Stat) -> Modifier:
        return self.modifiers[stat]

    def set_modifier(self, stat: Stat, update: Callable[[Modifier], Modifier]) -> Modifier:
        """Replace the stage of a stat with update(current). Returns the new stage."""
        self.modifiers[stat] = update(self.modifiers[stat])
        return self.modifiers[stat]

    def change_stage(self, stat: Stat, delta: int) -> Modifier:
        """Raise (delta > 0) or lower a stage, saturating at -6 / +6."""
        return self.set_modifier(stat, lambda modifier: modifier + delta)
