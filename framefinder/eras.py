"""
eras – The era-specific arithmetic used while filtering and refining frames.

Diamond/Pearl/Platinum scale a 16-bit rand by dividing by a constant and test
the top bit; every other Gen 3/4 game uses modulo and tests the low bit. The
four formulas are grouped per era so the frame finder picks one rule set when
its search context is built and never branches on the game again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from framefinder.config import (
    CUTE_CHARM_MODULO,
    DPPT_CUTE_CHARM_DIVISOR,
    DPPT_NATURE_DIVISOR,
    NATURE_COUNT,
)


@dataclass(frozen=True)
class EraRules:
    """
    Formulas applied to RNG outputs.

    nature_from_rand: nature index (0-24) rolled from a 16-bit rand.
    sync_bit: Synchronize check bit of a 16-bit rand (0 means the proc hits).
    sync_fail_bit: Synchronize check bit read from a full 32-bit state
        (anything but 1 means a Synchronize lead would have failed there).
    cute_charm_proc: whether a 16-bit rand passes the 2/3 Cute Charm check.
    slot_force_bit: Static/Magnet Pull slot-forcing bit of a 16-bit rand.
    """
    name: str
    nature_from_rand: Callable[[int], int]
    sync_bit: Callable[[int], int]
    sync_fail_bit: Callable[[int], int]
    cute_charm_proc: Callable[[int], bool]
    slot_force_bit: Callable[[int], int]


DIVIDE_RULES = EraRules(
    name="dppt",
    nature_from_rand=lambda rand: rand // DPPT_NATURE_DIVISOR,
    sync_bit=lambda rand: rand >> 15,
    sync_fail_bit=lambda seed: seed >> 31,
    cute_charm_proc=lambda rand: rand // DPPT_CUTE_CHARM_DIVISOR != 0,
    slot_force_bit=lambda rand: rand >> 15,
)

MODULO_RULES = EraRules(
    name="modulo",
    nature_from_rand=lambda rand: rand % NATURE_COUNT,
    sync_bit=lambda rand: rand & 1,
    sync_fail_bit=lambda seed: (seed >> 16) & 1,
    cute_charm_proc=lambda rand: rand % CUTE_CHARM_MODULO != 0,
    slot_force_bit=lambda rand: rand & 1,
)


def rules_for(dppt: bool) -> EraRules:
    """Pick the rule set for Diamond/Pearl/Platinum or everything else."""
    return DIVIDE_RULES if dppt else MODULO_RULES
