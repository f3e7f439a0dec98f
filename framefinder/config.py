"""
Global configuration for the Gen 3/4 frame finder.
All RNG constants, era divisors, and tunable search limits live here.
"""

# ── RNG Constants ────────────────────────────────────────────────────────────
# Gen 3/4 main LCRNG (wild encounters, Method 1/2/4, Method H/J/K).
LCRNG_MULT = 0x41C64E6D
LCRNG_ADD = 0x00006073

# Colosseum / XD RNG.
XDRNG_MULT = 0x000343FD
XDRNG_ADD = 0x00269EC3

# Gen 4 "alternate" RNG (Mystery Gift / Pokéwalker IV spreads).
ARNG_MULT = 0x6C078965
ARNG_ADD = 0x00000001

RNG_MASK = 0xFFFF_FFFF
RNG_MOD = 0x100000000  # 2^32

# ── Natures ──────────────────────────────────────────────────────────────────
NATURE_COUNT = 25

# Nature names (PID % 25)
NATURES = [
    "Hardy", "Lonely", "Brave", "Adamant", "Naughty",
    "Bold", "Docile", "Relaxed", "Impish", "Lax",
    "Timid", "Hasty", "Serious", "Jolly", "Naive",
    "Modest", "Mild", "Quiet", "Bashful", "Rash",
    "Calm", "Gentle", "Sassy", "Careful", "Quirky",
]

# ── Era divisors ─────────────────────────────────────────────────────────────
# Diamond/Pearl/Platinum scale a 16-bit rand by division instead of modulo.
DPPT_NATURE_DIVISOR = 0xA3E   # rand / 0xA3E -> 0..24
DPPT_CUTE_CHARM_DIVISOR = 0x5556  # rand / 0x5556 != 0 -> 2/3 odds
CUTE_CHARM_MODULO = 3  # rand % 3 != 0 -> 2/3 odds

# ── Gender ───────────────────────────────────────────────────────────────────
GENDER_MALE = 0
GENDER_FEMALE = 1
GENDER_GENDERLESS = 2

# Species gender ratio thresholds (PID & 0xFF < ratio -> female)
GENDER_RATIO_MALE_ONLY = 0
GENDER_RATIO_FEMALE_ONLY = 254
GENDER_RATIO_GENDERLESS = 255
GENDER_RATIO_EVEN = 127

# ── Game Versions ────────────────────────────────────────────────────────────
class GameVersion:
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    EMERALD = "emerald"
    FIRE_RED = "firered"
    LEAF_GREEN = "leafgreen"
    COLOSSEUM_XD = "cxd"
    DIAMOND = "diamond"
    PEARL = "pearl"
    PLATINUM = "platinum"
    HEART_GOLD = "heartgold"
    SOUL_SILVER = "soulsilver"

# Method H without lead support (only Emerald honours leads in Gen 3 wild gen)
RSFRLG_VERSIONS = (
    GameVersion.RUBY,
    GameVersion.SAPPHIRE,
    GameVersion.FIRE_RED,
    GameVersion.LEAF_GREEN,
)
# Method J
DPPT_VERSIONS = (GameVersion.DIAMOND, GameVersion.PEARL, GameVersion.PLATINUM)
# Method K
HGSS_VERSIONS = (GameVersion.HEART_GOLD, GameVersion.SOUL_SILVER)

# ── Search limits ────────────────────────────────────────────────────────────
# Upper bound on rejected PIDs walked back before the nature roll. A real PID
# loop ends after ~25 attempts (~200 with an Emerald Cute Charm gender lock).
MAX_SEED_UNROLL = 0x10000
