from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.genwun.constants import STRUGGLE_POWER, STRUGGLE_ACCURACY, STRUGGLE_RECOIL_DIVIDER
from src.genwun.enums import MoveEffectKind, Type


class MoveEffect(BaseModel):
    """Effect tag of a move. Only RECOIL carries a payload (the recoil divider)."""

    model_config = ConfigDict(frozen=True)

    kind: MoveEffectKind = MoveEffectKind.NORMAL
    divider: Optional[int] = Field(default=None, ge=1, le=255)  # u8, fraction of damage taken as recoil

    @model_validator(mode="after")
    def _divider_only_for_recoil(self) -> "MoveEffect":
        if self.kind == MoveEffectKind.RECOIL and self.divider is None:
            raise ValueError("Recoil effect needs a divider")
        if self.kind != MoveEffectKind.RECOIL and self.divider is not None:
            raise ValueError(f"{self.kind.name} effect takes no divider")
        return self

    @classmethod
    def normal(cls) -> "MoveEffect":
        return cls()

    @classmethod
    def recoil(cls, divider: int) -> "MoveEffect":
        return cls(kind=MoveEffectKind.RECOIL, divider=divider)

    @classmethod
    def self_ko(cls) -> "MoveEffect":
        return cls(kind=MoveEffectKind.SELF_KO)

    @classmethod
    def high_crit(cls) -> "MoveEffect":
        return cls(kind=MoveEffectKind.HIGH_CRIT)


class BattleMove(BaseModel):
    """A move a Pokemon could use - the subset of pokered's move struct that resolution reads"""

    model_config = ConfigDict(frozen=True)

    power: Optional[int] = Field(default=None, ge=1, le=255)  # u8, None means no damage
    accuracy: Optional[int] = Field(default=None, ge=1, le=255)  # u8 on a 0..255 scale, None means always hits
    effect: MoveEffect = Field(default_factory=MoveEffect.normal)
    type: Type = Type.NORMAL

    @classmethod
    def fallback(cls) -> "BattleMove":
        """Fallback move for when no other move is available (Struggle)."""
        return STRUGGLE


STRUGGLE = BattleMove(
    power=STRUGGLE_POWER,
    accuracy=STRUGGLE_ACCURACY,
    effect=MoveEffect.recoil(STRUGGLE_RECOIL_DIVIDER),
    type=Type.NORMAL,
)
