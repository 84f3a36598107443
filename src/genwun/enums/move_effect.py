from enum import IntEnum


class MoveEffectKind(IntEnum):
    """Move effects that change how a move resolves"""

    NORMAL = 0
    RECOIL = 1  # Take Down, Double-Edge, Submission, Struggle
    SELF_KO = 2  # Explosion, Self-Destruct
    HIGH_CRIT = 3  # Slash, Karate Chop, Razor Leaf, Crabhammer
