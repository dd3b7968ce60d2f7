"""
Random-pair tiers.

Strategy:
  - Sample two distinct words uniformly at random from the dictionary.
  - Run a bounded BFS between them.
  - Accept the pair if a ladder exists (and, for the constrained tier, if its
    step count fits the difficulty cap).

Both tiers stop after `max_attempts` samples so a sparse graph can never keep
the generator spinning.
"""

from __future__ import annotations

from typing import Optional

from packages.engine import path_steps, shortest_path
from .base import BaseTier, Challenge, GenerationContext, register


class _RandomPairTier(BaseTier):
    enforce_cap = True

    def _accept(self, path, ctx: GenerationContext) -> bool:
        if path is None:
            return False
        return (not self.enforce_cap) or path_steps(path) <= ctx.max_steps

    def propose(self, ctx: GenerationContext) -> Optional[Challenge]:
        words = ctx.words
        if len(words) < 2:
            return None

        for attempt in range(1, self.max_attempts + 1):
            start, end = self.rng.sample(words, 2)
            path = shortest_path(start, end, ctx.neighbors, max_depth=ctx.max_depth)
            if self._accept(path, ctx):
                ctx.stats[self.id] = attempt
                return Challenge(start, end, tuple(path), tier=self.id)

        ctx.stats[self.id] = self.max_attempts
        return None


@register
class ConstrainedRandomTier(_RandomPairTier):
    id = "constrained_random"
    name = "Random pair within difficulty"
    max_attempts = 100
    enforce_cap = True


@register
class UnconstrainedRandomTier(_RandomPairTier):
    id = "unconstrained_random"
    name = "Random pair, any length"
    max_attempts = 1000
    enforce_cap = False
