"""
pidiv – PID/IV derivation descriptor consumed by the frame finder.

A PIDIV is the result of reversing a Pokémon's PID and IVs back to the RNG
state they were generated from. Classifying the method is done upstream; this
module only names the method families and carries the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from framefinder.rng import RNG


class PIDType(Enum):
    """PID/IV generation method a spread was matched to."""
    NONE = auto()

    # Gen 3/4 LCRNG PID loop (wild + static)
    METHOD_1 = auto()
    METHOD_1_UNOWN = auto()
    METHOD_2 = auto()
    METHOD_2_UNOWN = auto()
    METHOD_3 = auto()
    METHOD_3_UNOWN = auto()
    METHOD_4 = auto()
    METHOD_4_UNOWN = auto()
    METHOD_1_ROAMER = auto()

    # Gen 3 event (BACD) spreads
    BACD_R = auto()
    BACD_U = auto()

    # Colosseum / XD
    CXD = auto()
    CHANNEL = auto()

    # Gen 4 specials
    CUTE_CHARM = auto()
    CHAIN_SHINY = auto()
    G4_MG_ANTI_SHINY = auto()
    POKEWALKER = auto()


# Methods a wild encounter generator can produce; anything else has no frames.
WILD_PID_TYPES = frozenset({
    PIDType.METHOD_1,
    PIDType.METHOD_1_UNOWN,
    PIDType.METHOD_2,
    PIDType.METHOD_2_UNOWN,
    PIDType.METHOD_4,
    PIDType.METHOD_4_UNOWN,
    PIDType.CUTE_CHARM,
})


@dataclass(frozen=True)
class PIDIV:
    """
    Matched PID/IV derivation.

    ``origin_seed`` is the RNG state immediately before the first PID call,
    i.e. the state whose high 16 bits were read for the nature roll.
    ``rng`` is None when the spread has no RNG correlation at all.
    """
    rng: Optional[RNG]
    origin_seed: int = 0
    type: PIDType = PIDType.NONE

    @property
    def has_seed(self) -> bool:
        return self.rng is not None

    def __repr__(self) -> str:
        rng_name = self.rng.name if self.rng is not None else None
        return (
            f"PIDIV(rng={rng_name}, "
            f"origin_seed=0x{self.origin_seed:08X}, "
            f"type={self.type.name})"
        )


# Spread with no RNG correlation
NO_SEED = PIDIV(rng=None)
