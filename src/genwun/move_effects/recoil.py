from typing import Optional

from src.genwun.enums import MoveEffectKind
from src.genwun.schema.battle_move import BattleMove
from src.genwun.schema.battle_state import BattleState


def get_recoil(move: BattleMove, damage_dealt: int) -> Optional[int]:
    """Recoil taken by the user of a recoil move.

    Always at least 1, matching pokered's RecoilEffect. None for moves
    without recoil.
    """
    if move.effect.kind != MoveEffectKind.RECOIL or move.effect.divider is None:
        return None
    return max(damage_dealt // move.effect.divider, 1)


def apply_recoil(attacker: BattleState, move: BattleMove, damage_dealt: int) -> Optional[int]:
    """Apply recoil to the attacker. Returns the recoil taken, None if the move has none."""
    recoil = get_recoil(move, damage_dealt)
    if recoil is not None:
        attacker.damage(recoil)
    return recoil
