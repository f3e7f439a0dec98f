"""
frame – Candidate encounter frames and the lead requirements attached to them.

A Frame is one hypothesis about where in the RNG sequence a wild encounter
started: the seed of that frame, the encounter slot value (ESV) read there,
and the lead ability/item that must have been active for the hypothesis to
hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Optional

from framefinder.rng import RNG


class FrameType(Enum):
    """Wild encounter call pattern."""
    NONE = auto()
    METHOD_H = auto()   # Gen 3: ESV, level, nature, PID loop
    METHOD_JK = auto()  # Gen 4: ESV, nature, PID loop


class LeadRequired(IntFlag):
    """Lead condition a frame needs in-game. ``X_FAIL`` is ``X | FAIL``."""
    NONE = 0
    CUTE_CHARM = 1 << 0
    SYNCHRONIZE = 1 << 1
    STATIC_MAGNET = 1 << 2
    INTIMIDATE_KEEN_EYE = 1 << 3
    PRESSURE_HUSTLE_SPIRIT = 1 << 4

    # The lead was present but its proc check failed.
    FAIL = 1 << 7

    CUTE_CHARM_FAIL = CUTE_CHARM | FAIL
    SYNCHRONIZE_FAIL = SYNCHRONIZE | FAIL
    PRESSURE_HUSTLE_SPIRIT_FAIL = PRESSURE_HUSTLE_SPIRIT | FAIL

    @property
    def is_fail(self) -> bool:
        return bool(self & LeadRequired.FAIL)

    @property
    def base(self) -> "LeadRequired":
        """The lead without its fail marker."""
        return LeadRequired(self.value & ~LeadRequired.FAIL.value)


# Leads whose successful proc changes the slot or level picked downstream.
LEVEL_SLOT_MODIFIERS = (
    LeadRequired.STATIC_MAGNET
    | LeadRequired.INTIMIDATE_KEEN_EYE
    | LeadRequired.PRESSURE_HUSTLE_SPIRIT
)


@dataclass(repr=False)
class Frame:
    """A candidate RNG frame for a wild encounter."""
    seed: int
    lead: LeadRequired = LeadRequired.NONE
    esv: int = 0
    frame_type: FrameType = FrameType.NONE
    rng: Optional[RNG] = None

    @property
    def level_slot_modified(self) -> bool:
        return not self.lead.is_fail and bool(self.lead & LEVEL_SLOT_MODIFIERS)

    def __repr__(self) -> str:
        return (
            f"Frame(seed=0x{self.seed:08X}, esv=0x{self.esv:04X}, "
            f"lead={self.lead.name}, type={self.frame_type.name})"
        )
