from enum import IntEnum


class Type(IntEnum):
    """Pokemon types - from pokered/constants/type_constants.asm

    Physical types come first, special types start at FIRE (0x14 in the game).
    """

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    FIRE = 8
    WATER = 9
    GRASS = 10
    ELECTRIC = 11
    PSYCHIC = 12
    ICE = 13
    DRAGON = 14

    def is_physical(self) -> bool:
        """Gen I has no per-move split; the type decides the category."""
        return self < Type.FIRE


class Effectiveness(IntEnum):
    """Type matchup result. Values are the game's multiplier x10 (TypeEffects table)."""

    IMMUNE = 0
    RESIST = 5
    NEUTRAL = 10
    WEAK = 20
