from typing import Iterable

from src.genwun.enums.type import Effectiveness, Type
from src.genwun.utils.ratio import Ratio

# Effectiveness ratios, applied as (damage * num) // den
EFFECTIVENESS_RATIOS: dict[Effectiveness, Ratio] = {
    Effectiveness.IMMUNE: Ratio(0, 1),
    Effectiveness.RESIST: Ratio(1, 2),
    Effectiveness.NEUTRAL: Ratio(1, 1),
    Effectiveness.WEAK: Ratio(2, 1),
}

_W = Effectiveness.WEAK
_R = Effectiveness.RESIST
_I = Effectiveness.IMMUNE

# Generation I type chart as (AttackingType, DefendingType, Effectiveness) triplets.
# Pairs that are not listed are neutral. Quirks kept on purpose:
# - Ghost has no effect on Psychic (and Normal)
# - Fire does not resist Ice
# - Poison and Bug are each super effective on the other
TYPE_EFFECTIVENESS_CHART: list[tuple[Type, Type, Effectiveness]] = [
    # Normal
    (Type.NORMAL, Type.ROCK, _R),
    (Type.NORMAL, Type.GHOST, _I),
    # Fighting
    (Type.FIGHTING, Type.NORMAL, _W),
    (Type.FIGHTING, Type.ROCK, _W),
    (Type.FIGHTING, Type.ICE, _W),
    (Type.FIGHTING, Type.FLYING, _R),
    (Type.FIGHTING, Type.POISON, _R),
    (Type.FIGHTING, Type.BUG, _R),
    (Type.FIGHTING, Type.PSYCHIC, _R),
    (Type.FIGHTING, Type.GHOST, _I),
    # Flying
    (Type.FLYING, Type.FIGHTING, _W),
    (Type.FLYING, Type.BUG, _W),
    (Type.FLYING, Type.GRASS, _W),
    (Type.FLYING, Type.ROCK, _R),
    (Type.FLYING, Type.ELECTRIC, _R),
    # Poison
    (Type.POISON, Type.BUG, _W),
    (Type.POISON, Type.GRASS, _W),
    (Type.POISON, Type.POISON, _R),
    (Type.POISON, Type.GROUND, _R),
    (Type.POISON, Type.ROCK, _R),
    (Type.POISON, Type.GHOST, _R),
    # Ground
    (Type.GROUND, Type.POISON, _W),
    (Type.GROUND, Type.ROCK, _W),
    (Type.GROUND, Type.FIRE, _W),
    (Type.GROUND, Type.ELECTRIC, _W),
    (Type.GROUND, Type.BUG, _R),
    (Type.GROUND, Type.GRASS, _R),
    (Type.GROUND, Type.FLYING, _I),
    # Rock
    (Type.ROCK, Type.FLYING, _W),
    (Type.ROCK, Type.BUG, _W),
    (Type.ROCK, Type.FIRE, _W),
    (Type.ROCK, Type.ICE, _W),
    (Type.ROCK, Type.FIGHTING, _R),
    (Type.ROCK, Type.GROUND, _R),
    # Bug
    (Type.BUG, Type.POISON, _W),
    (Type.BUG, Type.GRASS, _W),
    (Type.BUG, Type.PSYCHIC, _W),
    (Type.BUG, Type.FIGHTING, _R),
    (Type.BUG, Type.FLYING, _R),
    (Type.BUG, Type.GHOST, _R),
    (Type.BUG, Type.FIRE, _R),
    # Ghost
    (Type.GHOST, Type.GHOST, _W),
    (Type.GHOST, Type.NORMAL, _I),
    (Type.GHOST, Type.PSYCHIC, _I),
    # Fire
    (Type.FIRE, Type.BUG, _W),
    (Type.FIRE, Type.GRASS, _W),
    (Type.FIRE, Type.ICE, _W),
    (Type.FIRE, Type.ROCK, _R),
    (Type.FIRE, Type.FIRE, _R),
    (Type.FIRE, Type.WATER, _R),
    (Type.FIRE, Type.DRAGON, _R),
    # Water
    (Type.WATER, Type.GROUND, _W),
    (Type.WATER, Type.ROCK, _W),
    (Type.WATER, Type.FIRE, _W),
    (Type.WATER, Type.WATER, _R),
    (Type.WATER, Type.GRASS, _R),
    (Type.WATER, Type.DRAGON, _R),
    # Grass
    (Type.GRASS, Type.GROUND, _W),
    (Type.GRASS, Type.ROCK, _W),
    (Type.GRASS, Type.WATER, _W),
    (Type.GRASS, Type.FLYING, _R),
    (Type.GRASS, Type.POISON, _R),
    (Type.GRASS, Type.BUG, _R),
    (Type.GRASS, Type.FIRE, _R),
    (Type.GRASS, Type.GRASS, _R),
    (Type.GRASS, Type.DRAGON, _R),
    # Electric
    (Type.ELECTRIC, Type.FLYING, _W),
    (Type.ELECTRIC, Type.WATER, _W),
    (Type.ELECTRIC, Type.GRASS, _R),
    (Type.ELECTRIC, Type.ELECTRIC, _R),
    (Type.ELECTRIC, Type.DRAGON, _R),
    (Type.ELECTRIC, Type.GROUND, _I),
    # Psychic
    (Type.PSYCHIC, Type.FIGHTING, _W),
    (Type.PSYCHIC, Type.POISON, _W),
    (Type.PSYCHIC, Type.PSYCHIC, _R),
    # Ice
    (Type.ICE, Type.FLYING, _W),
    (Type.ICE, Type.GROUND, _W),
    (Type.ICE, Type.GRASS, _W),
    (Type.ICE, Type.DRAGON, _W),
    (Type.ICE, Type.WATER, _R),
    (Type.ICE, Type.ICE, _R),
    # Dragon
    (Type.DRAGON, Type.DRAGON, _W),
]

# Lookup built once from the chart
_CHART_LOOKUP: dict[tuple[Type, Type], Effectiveness] = {(atk, dfn): eff for atk, dfn, eff in TYPE_EFFECTIVENESS_CHART}


class TypeEffectiveness:
    """Type matchup calculations for Generation I"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> Effectiveness:
        """
        Get effectiveness of an attacking type onto a single defending type.

        The chart is directional: get_effectiveness(a, b) and get_effectiveness(b, a)
        are independent entries.
        """
        return _CHART_LOOKUP.get((attacking_type, defending_type), Effectiveness.NEUTRAL)

    @staticmethod
    def get_ratio(attacking_type: Type, defending_type: Type) -> Ratio:
        return EFFECTIVENESS_RATIOS[TypeEffectiveness.get_effectiveness(attacking_type, defending_type)]

    @staticmethod
    def calculate_effectiveness(attacking_type: Type, defending_types: Iterable[Type]) -> Ratio:
        """
        Combined ratio against a single or dual-type defender.

        Possible results: 0, 1/4, 1/2, 1, 2, 4
        """
        combined = Ratio(1, 1)
        for defending_type in defending_types:
            combined = combined * TypeEffectiveness.get_ratio(attacking_type, defending_type)
        return combined

    @staticmethod
    def apply_effectiveness(attacking_type: Type, defending_types: Iterable[Type], damage: int) -> int:
        """Multiply damage by the ratio of each defending type, truncating after every step."""
        for defending_type in defending_types:
            damage = TypeEffectiveness.get_ratio(attacking_type, defending_type).apply(damage)
        return damage

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_type: Type) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == Effectiveness.WEAK
