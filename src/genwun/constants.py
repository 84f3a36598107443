# =============================================================================
# STAT STAGE CONSTANTS - from pokered/engine/battle/core.asm (StatModifierRatios)
# =============================================================================
MIN_STAT_STAGE = -6
DEFAULT_STAT_STAGE = 0  # Neutral (stored as 7 in the game's wPlayerMonStatMods)
MAX_STAT_STAGE = 6

# Stats are capped after stage modification (ApplyBoostedStat / CalculateModifiedStat)
MAX_STAT_VALUE = 999

# =============================================================================
# POKEMON STATS - from pokered/constants/battle_constants.asm
# =============================================================================
STAT_HP = 0
STAT_ATK = 1
STAT_DEF = 2
STAT_SPECIAL = 3
STAT_SPEED = 4
NUM_STATS = 5

# Battle-only stats
STAT_ACC = 5  # Accuracy - Only in battles
STAT_EVASION = 6  # Evasion - Only in battles

NUM_BATTLE_STATS = 7  # NUM_STATS + 2, includes Accuracy and Evasion

# =============================================================================
# POKEMON LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100

# DVs are 4 bits, stat experience is a u16
MAX_PER_STAT_IVS = 15
MAX_PER_STAT_EVS = 65535
MAX_BASE_STAT = 255

# Stat experience contribution is ceil(sqrt(EV)) / 4, capped at 63
MAX_EV_BONUS = 63

# Sleep counter occupies the low 3 bits of the status byte
MAX_SLEEP_TURNS = 7

# =============================================================================
# DAMAGE FORMULA - from pokered/engine/battle/core.asm (CalculateDamage)
# =============================================================================
MAX_BASE_DAMAGE = 997
MIN_BASE_DAMAGE = 2

# Attack/Defense above this are scaled by 1/4 and truncated to 8 bits
STAT_SCALE_THRESHOLD = 255
STAT_SCALE_DIVISOR = 4
BYTE_MASK = 0xFF

# Random damage roll: 217..255 inclusive, divided by 255 (RandomizeDamage)
DAMAGE_ROLL_MIN = 217
DAMAGE_ROLL_MAX = 255
DAMAGE_ROLL_DIVISOR = 255

# STAB is damage + damage/2
STAB_NUMERATOR = 3
STAB_DENOMINATOR = 2

# =============================================================================
# RANDOM DRAWS
# =============================================================================
# One random byte (0..255)
RANDOM_BYTE_RANGE = 256

# Critical hit threshold multiplier for high critical moves (Slash, Karate Chop...)
HIGH_CRIT_MULTIPLIER = 4

# =============================================================================
# STRUGGLE - from pokered/data/moves/moves.asm
# =============================================================================
STRUGGLE_POWER = 50
STRUGGLE_ACCURACY = 255
STRUGGLE_RECOIL_DIVIDER = 2
