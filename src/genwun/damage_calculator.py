"""
Damage calculation system - port of pokered's damage routines

This module implements the damage calculation from pokered/engine/battle/core.asm:
- GetDamageVarsForPlayerAttack / GetDamageVarsForEnemyAttack (stat selection and scaling)
- CalculateDamage (base formula)
- AdjustDamageForMoveType (STAB and type effectiveness)
- RandomizeDamage (217..255 roll)

Key design principles:
- Integer arithmetic only, truncating at every step in the game's order
- Attack and Defense are scaled together when either exceeds one byte
- No intermediate value is narrowed before the final result
"""

import logging

from src.genwun.constants import (
    BYTE_MASK,
    DAMAGE_ROLL_DIVISOR,
    DAMAGE_ROLL_MAX,
    DAMAGE_ROLL_MIN,
    MAX_BASE_DAMAGE,
    MIN_BASE_DAMAGE,
    STAB_DENOMINATOR,
    STAB_NUMERATOR,
    STAT_SCALE_DIVISOR,
    STAT_SCALE_THRESHOLD,
)
from src.genwun.enums import MoveEffectKind, Stat, Type
from src.genwun.schema.battle_move import BattleMove
from src.genwun.schema.battle_state import BattleState
from src.genwun.type_effectiveness import TypeEffectiveness
from src.genwun.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def is_type_physical(move_type: Type) -> bool:
    """Check if move type is physical (Gen I: the type decides the category)"""
    return move_type.is_physical()


def random_damage_roll(rng: RandomSource) -> int:
    """Draw the damage roll, 217..255 inclusive (39 values)."""
    return rng.randrange(DAMAGE_ROLL_MIN, DAMAGE_ROLL_MAX + 1)


def scale_stats(attack: int, defense: int) -> tuple[int, int]:
    """
    Bring Attack and Defense back into one byte.

    If either value exceeds 255, BOTH are divided by 4 and truncated to 8
    bits in the same step, like the game's 8-bit registers. A stat above 1023
    therefore wraps around.
    """
    if attack > STAT_SCALE_THRESHOLD or defense > STAT_SCALE_THRESHOLD:
        attack = (attack // STAT_SCALE_DIVISOR) & BYTE_MASK
        defense = (defense // STAT_SCALE_DIVISOR) & BYTE_MASK
    return attack, defense


class DamageCalculator:
    """
    Damage calculator for a single attack

    Mirrors the order of operations of the game: stat selection, Explosion
    halving, scaling, base formula, STAB, type effectiveness, random roll.

    The game reads the unmodified stats for both regular and critical hits.
    Pass apply_stages=True to use the stage-modified stats on regular hits.
    """

    def __init__(self, apply_stages: bool = False):
        self.apply_stages = apply_stages

    def select_stats(self, move: BattleMove, attacker: BattleState, defender: BattleState, critical: bool = False) -> tuple[int, int]:
        """
        Pick the (attack, defense) pair for the move's category.

        Raw stats are used unless apply_stages is set. Critical hits always
        ignore stages on both sides.
        """
        if move.type.is_physical():
            attack_stat, defense_stat = Stat.ATTACK, Stat.DEFENSE
        else:
            attack_stat, defense_stat = Stat.SPECIAL, Stat.SPECIAL

        if self.apply_stages and not critical:
            return attacker.modified_stat(attack_stat), defender.modified_stat(defense_stat)
        return attacker[attack_stat], defender[defense_stat]

    def calculate_base_damage(self, move: BattleMove, attacker: BattleState, defender: BattleState, critical: bool = False) -> int:
        """
        Calculate damage before the random roll

        Args:
            move: Move being used
            attacker: Attacking battler
            defender: Defending battler
            critical: Critical hit (level is doubled, stages ignored)

        Returns:
            Damage after STAB and type effectiveness, 0 for moves without power
        """
        if move.power is None:
            return 0

        attack, defense = self.select_stats(move, attacker, defender, critical)

        # Explosion and Self-Destruct halve the target's defense
        if move.effect.kind == MoveEffectKind.SELF_KO:
            defense //= 2

        attack, defense = scale_stats(attack, defense)

        level = attacker.pokemon.level
        if critical:
            level *= 2

        damage = move.power * max(attack, 1) * (2 * level // 5 + 2)
        damage //= max(defense, 1)
        damage = MIN_BASE_DAMAGE + min(damage // 50, MAX_BASE_DAMAGE)

        # Same-Type Attack Bonus
        if attacker.pokemon.has_type(move.type):
            damage = damage * STAB_NUMERATOR // STAB_DENOMINATOR

        damage = TypeEffectiveness.apply_effectiveness(move.type, defender.pokemon.get_types(), damage)
        logger.debug("base damage: power=%d attack=%d defense=%d level=%d damage=%d", move.power, attack, defense, level, damage)
        return damage

    def calculate_damage(self, move: BattleMove, rng: RandomSource, attacker: BattleState, defender: BattleState, critical: bool = False) -> int:
        """Compute the damage when the attacker hits the defender with this move, roll included."""
        if move.power is None:
            return 0

        damage = self.calculate_base_damage(move, attacker, defender, critical)
        roll = random_damage_roll(rng)
        final = damage * roll // DAMAGE_ROLL_DIVISOR
        logger.debug("damage roll: roll=%d damage=%d", roll, final)
        return final

    def damage_range(self, move: BattleMove, attacker: BattleState, defender: BattleState, critical: bool = False) -> tuple[int, int]:
        """Lowest and highest damage the move can do, over every possible roll."""
        damage = self.calculate_base_damage(move, attacker, defender, critical)
        return damage * DAMAGE_ROLL_MIN // DAMAGE_ROLL_DIVISOR, damage * DAMAGE_ROLL_MAX // DAMAGE_ROLL_DIVISOR
