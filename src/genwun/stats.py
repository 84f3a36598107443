"""
Stat calculation - port of pokered's CalcStat (engine/pokemon/experience.asm)

Raw stats depend only on level, base stat, DV (IV) and stat experience (EV).
Stage modifiers are applied later, see stat_stages.Modifier.
"""

from math import isqrt
from typing import TYPE_CHECKING

from src.genwun.constants import MAX_EV_BONUS, NUM_STATS
from src.genwun.enums import Stat
from src.genwun.errors import InvalidStatError

if TYPE_CHECKING:
    from src.genwun.schema.pokemon import Pokemon

# Container for values for all stats, indexed by Stat.HP .. Stat.SPEED
StatSet = list[int]

# Maximum attainable individual values (DVs) and effort values (stat experience)
PERFECT_IVS: tuple[int, ...] = (0xF,) * NUM_STATS
PERFECT_EVS: tuple[int, ...] = (0xFFFF,) * NUM_STATS


def integer_sqrt(n: int) -> int:
    """Integer square root: r*r <= n < (r+1)*(r+1)."""
    return isqrt(n)


def ev_bonus(ev: int) -> int:
    """Stat experience contribution: (floor(sqrt(EV - 1)) + 1) / 4, capped at 63."""
    s = integer_sqrt(max(ev - 1, 0)) + 1
    return min(s // 4, MAX_EV_BONUS)


def calc_stat(stat: Stat, base: int, iv: int, ev: int, level: int) -> int:
    """
    Calculate the stat value given all other parameters.

    The order of operations matters, every step truncates:
        s = min((isqrt(max(EV-1, 0)) + 1) // 4, 63) + 2 * (IV + BS)
        stat = s * L // 100 + (L + 10 if HP else 5)
    """
    if not stat.has_raw_value:
        raise InvalidStatError(stat.name)

    s = ev_bonus(ev) + 2 * (iv + base)
    bonus = level + 10 if stat == Stat.HP else 5
    return s * level // 100 + bonus


def calc_raw_stat(pokemon: "Pokemon", stat: Stat) -> int:
    """Raw (unboosted) stat of a Pokemon. Accuracy and Evasion have none."""
    if not stat.has_raw_value:
        raise InvalidStatError(stat.name)
    return calc_stat(stat, pokemon.base_stats[stat], pokemon.ivs[stat], pokemon.evs[stat], pokemon.level)


def calc_stat_set(pokemon: "Pokemon") -> StatSet:
    return [calc_raw_stat(pokemon, Stat(i)) for i in range(NUM_STATS)]
