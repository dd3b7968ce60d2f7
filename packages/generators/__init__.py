"""
Puzzle generation.

Tiers are tried in TIER_ORDER until one yields a challenge:
  1) constrained_random   : random pair whose ladder fits the difficulty cap
  2) unconstrained_random : random pair with any ladder
  3) connected_pair       : first word that has a neighbor
  4) degenerate           : start == target (isolated-word dictionary)

The only "no challenge" outcome is an empty dictionary.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Mapping, Optional, Sequence

from packages.engine import DEFAULT_MAX_DEPTH
from .base import BaseTier, Challenge, GenerationContext, REGISTRY, register

from . import random_pairs  # noqa: F401
from . import fallbacks  # noqa: F401

logger = logging.getLogger(__name__)

TIER_ORDER = ["constrained_random", "unconstrained_random", "connected_pair", "degenerate"]


def create_tier(tier_id: str) -> BaseTier:
    """
    Factory: instantiate a registered tier by id.
    """
    try:
        cls = REGISTRY[tier_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown tier id: {tier_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_tier_ids() -> List[str]:
    return sorted(REGISTRY.keys())


def generate_challenge(
        words: Sequence[str],
        neighbors: Mapping[str, List[str]],
        max_steps: float = math.inf,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[Challenge]:
    """
    Pick a (start, target) pair and its optimal ladder.

    Args:
      words     : dictionary words (sorted, for reproducible sampling)
      neighbors : adjacency index for those words
      max_steps : difficulty cap on player steps (math.inf = unlimited)
      seed/rng  : randomness source (rng wins when both are given)
      max_depth : BFS depth bound for the random tiers

    Returns None only when `words` is empty.
    """
    if not words:
        logger.warning("Cannot generate a challenge: dictionary is empty")
        return None

    if rng is None:
        rng = random.Random(seed)

    ctx = GenerationContext(words=words, neighbors=neighbors,
                            max_steps=max_steps, max_depth=max_depth)

    for tier_id in TIER_ORDER:
        tier = create_tier(tier_id)
        tier.reset(rng=rng)
        challenge = tier.propose(ctx)
        if challenge is not None:
            if tier_id == TIER_ORDER[0]:
                logger.debug("Challenge %s -> %s (%d steps) after %d attempt(s)",
                             challenge.start, challenge.target, challenge.optimal_steps,
                             ctx.stats.get(tier_id, 1))
            else:
                logger.info("Fell back to tier '%s': %s -> %s", tier_id,
                            challenge.start, challenge.target)
            return challenge
        logger.debug("Tier '%s' produced nothing", tier_id)

    # Unreachable with a non-empty dictionary (degenerate tier always succeeds).
    return None


def describe_tiers(counts: Mapping[str, int]) -> str:
    """Render tier id -> count as 'Name: n' pairs, in TIER_ORDER first."""
    order = TIER_ORDER + sorted(k for k in counts if k not in TIER_ORDER)
    parts = []
    for tier_id in order:
        if not counts.get(tier_id):
            continue
        cls = REGISTRY.get(tier_id)
        parts.append(f"{cls.name if cls else tier_id}: {counts[tier_id]}")
    return ", ".join(parts) or "none"


__all__ = [
    "Challenge",
    "BaseTier",
    "GenerationContext",
    "REGISTRY",
    "TIER_ORDER",
    "register",
    "create_tier",
    "get_tier_ids",
    "describe_tiers",
    "generate_challenge",
]
