"""
seed_info – Candidate nature-roll seeds for a matched PID.

Gen 3/4 wild generation rolls a nature, then keeps generating PIDs (two RNG
calls each) until one has that nature. Walking backwards from the PIDIV origin
seed, every earlier pair of calls may have been a rejected PID, so every other
state is a possible nature roll. The walk stops at the first pair that would
have been accepted: the game could not have rerolled past it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, TYPE_CHECKING

from framefinder.config import MAX_SEED_UNROLL, NATURE_COUNT
from framefinder.pidiv import PIDIV
from framefinder.rng import high16

if TYPE_CHECKING:
    from framefinder.frame_generator import FrameGenerator

logger = logging.getLogger(__name__)


class LockInfo(Enum):
    """Why a walked-back PID would or would not have ended the PID loop."""
    PASS = auto()
    NATURE = auto()
    GENDER = auto()


@dataclass(frozen=True)
class SeedInfo:
    """
    A possible nature-roll seed.

    ``charm3`` is set once the walk has passed a PID with the right nature but
    the wrong gender: only an Emerald Cute Charm lead rejects such a PID, so
    every seed from there on requires that lead.
    """
    seed: int
    charm3: bool = False


def verify_pid_criteria(pid: int, info: FrameGenerator) -> LockInfo:
    """Check whether the PID loop would have accepted *pid*."""
    if pid % NATURE_COUNT != info.nature:
        return LockInfo.NATURE

    if not info.gendered:
        return LockInfo.PASS

    gender = pid & 0xFF
    if not info.gender_low <= gender <= info.gender_high:
        return LockInfo.GENDER
    return LockInfo.PASS


def get_seeds_until_nature(
    pidiv: PIDIV,
    info: FrameGenerator,
    max_unroll: int = MAX_SEED_UNROLL,
) -> Iterator[SeedInfo]:
    """
    Yield possible nature-roll seeds, newest first, starting at the PIDIV
    origin seed and stopping once a walked-back PID would have been accepted.
    """
    rng = pidiv.rng
    charm3 = False

    seed = pidiv.origin_seed
    yield SeedInfo(seed)

    s1 = seed
    s2 = rng.prev(s1)
    unrolled = 0
    while True:
        pid = (high16(s1) << 16) | high16(s2)

        lock = verify_pid_criteria(pid, info)
        if lock is LockInfo.PASS:
            return
        if lock is LockInfo.GENDER:
            charm3 = True

        if unrolled >= max_unroll:
            logger.warning(
                "Stopped walking back from 0x%08X after %d PIDs without a nature match",
                pidiv.origin_seed, unrolled,
            )
            return

        s1 = rng.prev(s2)
        s2 = rng.prev(s1)
        unrolled += 1
        yield SeedInfo(s1, charm3)
