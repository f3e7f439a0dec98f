"""
pokemon – The Pokémon record the frame finder reads.

Only the fields the search needs are modelled: the personality value (which
doubles as the encryption constant in Gen 3/4), the origin game, and the
gender information used by Emerald's Cute Charm gender lock.
"""

from __future__ import annotations

from dataclasses import dataclass

from framefinder.config import (
    GENDER_FEMALE,
    GENDER_GENDERLESS,
    GENDER_MALE,
    GENDER_RATIO_FEMALE_ONLY,
    GENDER_RATIO_GENDERLESS,
    GENDER_RATIO_MALE_ONLY,
    NATURE_COUNT,
    NATURES,
)


@dataclass(frozen=True)
class Pokemon:
    """A Gen 3/4 Pokémon as seen by the frame finder."""
    pid: int
    version: str
    gender: int = GENDER_GENDERLESS
    gender_ratio: int = GENDER_RATIO_GENDERLESS

    def __post_init__(self) -> None:
        if not 0 <= self.pid <= 0xFFFF_FFFF:
            raise ValueError(f"PID out of range: {self.pid:#x}")
        if self.gender not in (GENDER_MALE, GENDER_FEMALE, GENDER_GENDERLESS):
            raise ValueError(f"Invalid gender: {self.gender}")
        if not 0 <= self.gender_ratio <= 0xFF:
            raise ValueError(f"Gender ratio out of range: {self.gender_ratio}")

    @property
    def encryption_constant(self) -> int:
        """Gen 3/4 use the PID as the encryption constant."""
        return self.pid

    @property
    def nature(self) -> int:
        return self.encryption_constant % NATURE_COUNT

    @property
    def nature_name(self) -> str:
        return NATURES[self.nature]

    @property
    def gender_value(self) -> int:
        """Low byte of the PID, compared against the species ratio."""
        return self.pid & 0xFF

    @property
    def is_dual_gender_species(self) -> bool:
        return self.gender_ratio not in (
            GENDER_RATIO_MALE_ONLY,
            GENDER_RATIO_FEMALE_ONLY,
            GENDER_RATIO_GENDERLESS,
        )

    def __repr__(self) -> str:
        return (
            f"Pokemon(pid=0x{self.pid:08X}, version={self.version}, "
            f"nature={self.nature_name}, gender={self.gender})"
        )
