"""
Hit and critical hit checks - MoveHitTest and CriticalHitTest from pokered/engine/battle/core.asm

Both draw a single random byte and compare it against a threshold with a
strict comparison, which is where the famous 1/256 miss comes from.
"""

import logging

from src.genwun.constants import BYTE_MASK, HIGH_CRIT_MULTIPLIER
from src.genwun.enums import MoveEffectKind, Stat
from src.genwun.schema.battle_move import BattleMove
from src.genwun.schema.battle_state import BattleState
from src.genwun.stat_stages import Modifier
from src.genwun.utils.rng import RandomSource, rand_byte

logger = logging.getLogger(__name__)


def hit_threshold(move: BattleMove, accuracy: Modifier, evasion: Modifier) -> int:
    """Scaled accuracy of a move: floor(floor(acc * accuracy_ratio) / evasion_ratio)."""
    if move.accuracy is None:
        return BYTE_MASK + 1
    scaled = accuracy.ratio().apply(move.accuracy)
    return evasion.ratio().divide(scaled)


def hits(move: BattleMove, rng: RandomSource, accuracy: Modifier, evasion: Modifier) -> bool:
    """
    Check whether a move connects.

    Args:
        move: Move being used
        rng: Random source, one byte is drawn unless the move never misses
        accuracy: Attacker's accuracy stage
        evasion: Defender's evasion stage

    A 255-accuracy move at neutral stages still misses on a roll of 255.
    """
    if move.accuracy is None:
        return True

    threshold = hit_threshold(move, accuracy, evasion)
    roll = rand_byte(rng)
    result = threshold > roll
    logger.debug("hit check: threshold=%d roll=%d hit=%s", threshold, roll, result)
    return result


def crit_threshold(move: BattleMove, base_speed: int) -> int:
    """Critical hit threshold from the attacker's base Speed. Focus Energy and Dire Hit are not modelled."""
    threshold = base_speed // 2
    if move.effect.kind == MoveEffectKind.HIGH_CRIT:
        threshold *= HIGH_CRIT_MULTIPLIER
    return min(threshold, BYTE_MASK)


def is_critical(move: BattleMove, rng: RandomSource, attacker: BattleState) -> bool:
    """Check whether a move lands a critical hit (RBY algorithm, not Stadium's)."""
    threshold = crit_threshold(move, attacker.pokemon.base_stats[Stat.SPEED])
    roll = rand_byte(rng)
    result = roll < threshold
    logger.debug("critical check: threshold=%d roll=%d critical=%s", threshold, roll, result)
    return result
