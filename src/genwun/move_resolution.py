"""
Move resolution - one attack from start to finish

Runs the per-action sequence of the game:
    CheckHit -> (miss: stop) -> ComputeCritical -> damage -> recoil

The turn order, status checks before moving and the effects of non-damaging
moves belong to the caller's battle loop.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from src.genwun.accuracy import hits, is_critical
from src.genwun.damage_calculator import DamageCalculator
from src.genwun.enums import Stat
from src.genwun.move_effects.recoil import apply_recoil, get_recoil
from src.genwun.schema.battle_move import BattleMove
from src.genwun.schema.battle_state import BattleState
from src.genwun.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class MoveResult(BaseModel):
    """Outcome of a single move"""

    hit: bool
    critical: bool = False
    damage: int = Field(default=0, ge=0)
    recoil: Optional[int] = Field(default=None, ge=1)
    defender_fainted: bool = False
    attacker_fainted: bool = False


def resolve_move(
    move: BattleMove,
    rng: RandomSource,
    attacker: BattleState,
    defender: BattleState,
    apply: bool = True,
    calculator: Optional[DamageCalculator] = None,
) -> MoveResult:
    """
    Resolve one use of a move by attacker against defender.

    Args:
        move: Move being used
        rng: Random source for the hit, critical and damage rolls
        attacker: Battler using the move
        defender: Target battler
        apply: Apply damage to the defender and recoil to the attacker
        calculator: Damage calculator to use (a default one is created)

    Returns:
        MoveResult; damage and recoil are reported even when apply is False
    """
    calculator = calculator or DamageCalculator()

    if not hits(move, rng, attacker.get_modifier(Stat.ACCURACY), defender.get_modifier(Stat.EVASION)):
        logger.debug("move missed")
        return MoveResult(hit=False)

    critical = is_critical(move, rng, attacker)
    damage = calculator.calculate_damage(move, rng, attacker, defender, critical=critical)
    if apply:
        defender.damage(damage)
        recoil = apply_recoil(attacker, move, damage)
    else:
        recoil = get_recoil(move, damage)

    result = MoveResult(
        hit=True,
        critical=critical,
        damage=damage,
        recoil=recoil,
        defender_fainted=not defender.is_alive(),
        attacker_fainted=not attacker.is_alive(),
    )
    logger.debug("move resolved: %s", result)
    return result
