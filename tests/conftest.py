"""
Shared fixtures for the test suite.
"""
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from framefinder.config import GENDER_GENDERLESS, GENDER_RATIO_GENDERLESS, NATURE_COUNT
from framefinder.eras import rules_for
from framefinder.frame_generator import FrameGenerator
from framefinder.pidiv import PIDIV, PIDType
from framefinder.pokemon import Pokemon
from framefinder.rng import LCRNG, high16


@dataclass
class WildEncounter:
    """RNG states touched by one forward-simulated wild encounter."""
    pid: int
    origin_seed: int
    esv_seed: int
    level_seed: Optional[int]
    nature_seed: int


def simulate_wild(start_seed: int, method_h: bool, dppt: bool = False) -> WildEncounter:
    """
    Run a lead-less wild encounter forward from *start_seed*.

    Method H: ESV, level, nature, PID loop.  Method J/K: ESV, nature, PID loop.
    """
    rules = rules_for(dppt)
    s = LCRNG.next(start_seed)
    esv_seed = s
    level_seed = None
    if method_h:
        s = LCRNG.next(s)
        level_seed = s
    s = LCRNG.next(s)
    nature_seed = s
    nature = rules.nature_from_rand(high16(nature_seed))

    while True:
        origin = s
        low = LCRNG.next(s)
        high = LCRNG.next(low)
        s = high
        pid = (high16(high) << 16) | high16(low)
        if pid % NATURE_COUNT == nature:
            break

    return WildEncounter(pid, origin, esv_seed, level_seed, nature_seed)


@pytest.fixture
def wild_encounter():
    return simulate_wild


@pytest.fixture
def make_info():
    """Build a FrameGenerator with the nature already set, as get_frames does."""
    def _make(
        version: str,
        nature: int = 0,
        pid_type: PIDType = PIDType.METHOD_1,
        origin_seed: int = 0,
        gender: int = GENDER_GENDERLESS,
        gender_ratio: int = GENDER_RATIO_GENDERLESS,
    ):
        pidiv = PIDIV(rng=LCRNG, origin_seed=origin_seed, type=pid_type)
        pk = Pokemon(pid=nature, version=version, gender=gender, gender_ratio=gender_ratio)
        info = FrameGenerator(pidiv, pk)
        info.nature = nature
        return pidiv, info
    return _make
