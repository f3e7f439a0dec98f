"""
rng – 32-bit linear congruential RNGs used by Gen 3/4 Pokémon games.

Provides:
  - RNG: forward/reverse stepping of a single LCG (state * mult + add)
  - LCRNG: main Gen 3/4 generator (wild encounters, Method 1/2/4)
  - XDRNG: Colosseum / XD generator
  - ARNG: Gen 4 alternate generator
  - high16(): the "random number" a game reads out of a state

The reverse multiplier/addend are derived from the forward constants, so
``rng.prev(rng.next(seed)) == seed`` holds for every 32-bit seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from framefinder.config import (
    ARNG_ADD,
    ARNG_MULT,
    LCRNG_ADD,
    LCRNG_MULT,
    RNG_MASK,
    RNG_MOD,
    XDRNG_ADD,
    XDRNG_MULT,
)


def high16(seed: int) -> int:
    """Extract the high 16 bits (the 'random number')."""
    return (seed >> 16) & 0xFFFF


@dataclass(frozen=True)
class RNG:
    """A 32-bit LCG that can be stepped in both directions."""
    name: str
    mult: int
    add: int
    rev_mult: int = field(init=False, repr=False)
    rev_add: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # prev(s) = (s - add) * mult^-1 = s * mult^-1 - add * mult^-1
        rev_mult = pow(self.mult, -1, RNG_MOD)
        object.__setattr__(self, "rev_mult", rev_mult)
        object.__setattr__(self, "rev_add", (-self.add * rev_mult) & RNG_MASK)

    def next(self, seed: int) -> int:
        """Advance the RNG by one step."""
        return (seed * self.mult + self.add) & RNG_MASK

    def prev(self, seed: int) -> int:
        """Reverse the RNG by one step."""
        return (seed * self.rev_mult + self.rev_add) & RNG_MASK

    def advance(self, seed: int, frames: int) -> int:
        """Advance the RNG by N frames."""
        for _ in range(frames):
            seed = self.next(seed)
        return seed

    def reverse(self, seed: int, frames: int) -> int:
        """Reverse the RNG by N frames."""
        for _ in range(frames):
            seed = self.prev(seed)
        return seed


LCRNG = RNG("LCRNG", LCRNG_MULT, LCRNG_ADD)
XDRNG = RNG("XDRNG", XDRNG_MULT, XDRNG_ADD)
ARNG = RNG("ARNG", ARNG_MULT, ARNG_ADD)
