from typing import Iterable, Sequence, Union

from src.genwun.constants import MAX_LEVEL, MAX_PER_STAT_EVS, MAX_PER_STAT_IVS, NUM_STATS
from src.genwun.enums import Type
from src.genwun.schema.battle_state import BattleState
from src.genwun.schema.pokemon import Pokemon

PerStat = Union[int, Sequence[int]]


def _expand(value: PerStat) -> tuple[int, ...]:
    # A single number applies to every stat
    if isinstance(value, int):
        return (value,) * NUM_STATS
    return tuple(value)


def create_pokemon(
    base_stats: PerStat,
    types: Iterable[Type] = (Type.NORMAL,),
    level: int = MAX_LEVEL,
    iv: PerStat = MAX_PER_STAT_IVS,
    ev: PerStat = MAX_PER_STAT_EVS,
) -> Pokemon:
    """Build a Pokemon record. IVs and EVs default to perfect, like a fully trained link battle mon."""
    return Pokemon(
        level=level,
        base_stats=_expand(base_stats),
        ivs=_expand(iv),
        evs=_expand(ev),
        types=tuple(types),
    )


def create_battle_state(
    base_stats: PerStat,
    types: Iterable[Type] = (Type.NORMAL,),
    level: int = MAX_LEVEL,
    iv: PerStat = MAX_PER_STAT_IVS,
    ev: PerStat = MAX_PER_STAT_EVS,
) -> BattleState:
    return BattleState.new(create_pokemon(base_stats, types, level=level, iv=iv, ev=ev))
