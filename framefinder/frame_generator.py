"""
frame_generator – Per-search context for the frame finder.

Derives, from the matched PIDIV and the Pokémon, which wild call pattern
applies (Method H for Gen 3, Method J/K for Gen 4), whether lead abilities
can alter it, which era arithmetic to use, and the PID gender window that an
Emerald Cute Charm lead enforces.
"""

from __future__ import annotations

import logging

from framefinder.config import (
    DPPT_VERSIONS,
    GENDER_MALE,
    GENDER_GENDERLESS,
    GameVersion,
    HGSS_VERSIONS,
    RSFRLG_VERSIONS,
)
from framefinder.eras import EraRules, rules_for
from framefinder.frame import Frame, FrameType, LeadRequired
from framefinder.pidiv import PIDIV, WILD_PID_TYPES
from framefinder.pokemon import Pokemon
from framefinder.rng import LCRNG

logger = logging.getLogger(__name__)


def get_gender_window(gender: int, ratio: int) -> tuple[int, int]:
    """
    Return the inclusive (low, high) range of PID gender bytes that yield
    *gender* for a species with gender *ratio*.
    """
    if gender == GENDER_MALE:
        return ratio, 0xFF
    return 0, ratio - 1


class FrameGenerator:
    """Search configuration plus the Frame factory used by the filters."""

    def __init__(self, pidiv: PIDIV, pk: Pokemon) -> None:
        self.nature = 0
        self.frame_type = FrameType.NONE
        self.allow_leads = False
        self.dppt = False
        self.gendered = False
        self.gender_low = 0
        self.gender_high = 0xFF
        self.rng = pidiv.rng if pidiv.rng is not None else LCRNG

        if pidiv.type not in WILD_PID_TYPES:
            logger.debug("No wild frame pattern for PIDIV type %s", pidiv.type.name)
            self.rules = rules_for(self.dppt)
            return

        version = pk.version
        if version in RSFRLG_VERSIONS:
            self.frame_type = FrameType.METHOD_H
        elif version == GameVersion.EMERALD:
            self.frame_type = FrameType.METHOD_H
            self.allow_leads = True
            # Cute Charm keeps rerolling the PID until the gender matches too
            if pk.is_dual_gender_species and pk.gender != GENDER_GENDERLESS:
                self.gendered = True
                self.gender_low, self.gender_high = get_gender_window(
                    pk.gender, pk.gender_ratio
                )
        elif version in DPPT_VERSIONS:
            self.frame_type = FrameType.METHOD_JK
            self.dppt = True
            self.allow_leads = True
        elif version in HGSS_VERSIONS:
            self.frame_type = FrameType.METHOD_JK
            self.allow_leads = True
        else:
            logger.debug("No wild frame pattern for version %s", version)

        self.rules: EraRules = rules_for(self.dppt)

    def get_frame(self, seed: int, lead: LeadRequired, esv: int = 0) -> Frame:
        return Frame(
            seed=seed,
            lead=lead,
            esv=esv,
            frame_type=self.frame_type,
            rng=self.rng,
        )

    def __repr__(self) -> str:
        return (
            f"FrameGenerator(type={self.frame_type.name}, nature={self.nature}, "
            f"leads={self.allow_leads}, era={self.rules.name})"
        )
