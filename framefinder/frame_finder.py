"""
frame_finder – Recover wild encounter frames from a matched PID/IV spread.

Given a PIDIV (RNG + origin seed + method) and the Pokémon it belongs to,
lazily yields every RNG frame a Gen 3 (Method H) or Gen 4 (Method J/K) wild
encounter could have started on, each tagged with the lead ability or item
that must have been active for it to be the real one.

Pipeline:
  1. seed_info.get_seeds_until_nature: possible nature-roll seeds
  2. filter_nature_sync / filter_cute_charm: keep seeds that roll the nature
     (or a Synchronize / Cute Charm proc) and step back to the prior call
  3. refine_frames3 / refine_frames4: step back to the ESV call, fill in the
     encounter slot value and branch into the lead variants

The result still has to be checked against the encounter slots and levels of
the area the Pokémon came from.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from framefinder.config import NATURE_COUNT
from framefinder.frame import Frame, FrameType, LeadRequired
from framefinder.frame_generator import FrameGenerator
from framefinder.pidiv import PIDIV, PIDType
from framefinder.pokemon import Pokemon
from framefinder.rng import high16
from framefinder.seed_info import SeedInfo, get_seeds_until_nature

logger = logging.getLogger(__name__)


def get_frames(pidiv: PIDIV, pk: Pokemon) -> Iterator[Frame]:
    """
    Yield possible encounter frames for *pk*.

    Args:
        pidiv: Matched PID/IV derivation; needs an RNG and an origin seed.
        pk: The Pokémon the spread was matched for.

    Returns:
        Lazy iterator of Frame candidates, empty when no wild pattern applies.
    """
    if pidiv.rng is None:
        return

    info = FrameGenerator(pidiv, pk)
    if info.frame_type is FrameType.NONE:
        return

    info.nature = pk.encryption_constant % NATURE_COUNT
    logger.debug(
        "Searching %s frames from 0x%08X (%s, nature %d)",
        info.frame_type.name, pidiv.origin_seed, pidiv.type.name, info.nature,
    )

    # gather possible nature determination seeds until a same-nature PID breaks the unrolling
    seeds = get_seeds_until_nature(pidiv, info)

    if pidiv.type is PIDType.CUTE_CHARM:
        frames = filter_cute_charm(seeds, pidiv, info)
    else:
        frames = filter_nature_sync(seeds, pidiv, info)

    yield from refine_frames(frames, info)


def refine_frames(frames: Iterable[Frame], info: FrameGenerator) -> Iterator[Frame]:
    if info.frame_type is FrameType.METHOD_H:
        return refine_frames3(frames, info)
    return refine_frames4(frames, info)


def refine_frames3(frames: Iterable[Frame], info: FrameGenerator) -> Iterator[Frame]:
    """
    Method H call order: ESV, level, nature.

    Incoming frames sit on the level call. Each is yielded with its ESV
    filled in; lead-less frames are then expanded into the lead variants,
    which inject one extra call somewhere before the nature roll.
    """
    rng = info.rng
    queued: List[Frame] = []
    for f in frames:
        # Current seed of the frame is the level calc
        f.esv = high16(rng.prev(f.seed))
        yield f

        if f.lead != LeadRequired.NONE or not info.allow_leads:
            continue
        queued.append(f)

    for f in queued:
        prev0 = f.seed
        prev1 = rng.prev(prev0)
        prev2 = rng.prev(prev1)

        p0 = high16(prev0)
        p1 = high16(prev1)
        p2 = high16(prev2)

        # Pressure, Hustle, Vital Spirit: force max level
        # -2 ESV, -1 level, 0 max level proc (rand & 1), 1 nature
        max_level = p0 % 2 == 1
        lead = (
            LeadRequired.PRESSURE_HUSTLE_SPIRIT
            if max_level
            else LeadRequired.PRESSURE_HUSTLE_SPIRIT_FAIL
        )
        yield info.get_frame(prev2, lead, p2)

        # Intimidate, Keen Eye: same call; an inadequate level aborts the encounter
        if max_level:
            yield info.get_frame(prev2, LeadRequired.INTIMIDATE_KEEN_EYE, p2)

        # Cute Charm
        # -2 ESV, -1 proc (rand % 3 != 0), 0 level, 1 nature
        charm = p1 % 3 != 0
        lead = LeadRequired.CUTE_CHARM if charm else LeadRequired.CUTE_CHARM_FAIL
        yield info.get_frame(prev2, lead, p2)

        # Static, Magnet Pull
        # -2 slot proc (rand % 2 == 0), -1 ESV, 0 level, 1 nature
        # A failed proc calls the RNG exactly like no lead, so only the hit is new.
        if p2 % 2 == 0:
            yield info.get_frame(prev2, LeadRequired.STATIC_MAGNET, p1)


def refine_frames4(frames: Iterable[Frame], info: FrameGenerator) -> Iterator[Frame]:
    """
    Method J/K call order: ESV, nature.

    Incoming frames sit on the ESV call. Level modifiers sit between the ESV
    and the nature roll, slot modifiers before the ESV.
    """
    rng = info.rng
    rules = info.rules
    queued: List[Frame] = []
    for f in frames:
        f.esv = high16(f.seed)
        yield f

        if f.lead != LeadRequired.NONE:
            continue
        queued.append(f)

    for f in queued:
        prev = rng.prev(f.seed)
        p16 = high16(prev)

        yield info.get_frame(prev, LeadRequired.INTIMIDATE_KEEN_EYE, p16)
        yield info.get_frame(prev, LeadRequired.PRESSURE_HUSTLE_SPIRIT, p16)

        if rules.slot_force_bit(p16) != 1:
            continue
        yield info.get_frame(prev, LeadRequired.STATIC_MAGNET, high16(f.seed))


def filter_nature_sync(
    seeds: Iterable[SeedInfo],
    pidiv: PIDIV,
    info: FrameGenerator,
) -> Iterator[Frame]:
    """
    Keep seeds that roll the target nature, or that a Synchronize lead could
    have overridden, and step back to the call before the nature roll.
    """
    rng = pidiv.rng
    rules = info.rules
    for seed in seeds:
        s = seed.seed
        rand = high16(s)
        sync = info.allow_leads and not seed.charm3 and rules.sync_bit(rand) == 0
        reg = rules.nature_from_rand(rand) == info.nature
        if not sync and not reg:
            continue

        prev = rng.prev(s)
        if info.allow_leads and reg:
            # Synchronize rolled and missed, then the nature was rolled normally
            if rules.sync_fail_bit(prev) != 1:
                yield info.get_frame(rng.prev(prev), LeadRequired.SYNCHRONIZE_FAIL)
        if sync:
            yield info.get_frame(prev, LeadRequired.SYNCHRONIZE)
        if reg:
            lead = LeadRequired.CUTE_CHARM if seed.charm3 else LeadRequired.NONE
            yield info.get_frame(prev, lead)


def filter_cute_charm(
    seeds: Iterable[SeedInfo],
    pidiv: PIDIV,
    info: FrameGenerator,
) -> Iterator[Frame]:
    """
    Keep seeds that roll the target nature right after a successful Cute
    Charm proc. A failed proc looks like no lead at all, so it is not emitted.
    """
    rng = pidiv.rng
    rules = info.rules
    for seed in seeds:
        s = seed.seed
        if rules.nature_from_rand(high16(s)) != info.nature:
            continue

        prev = rng.prev(s)
        if not rules.cute_charm_proc(high16(prev)):
            continue

        yield info.get_frame(prev, LeadRequired.CUTE_CHARM)
