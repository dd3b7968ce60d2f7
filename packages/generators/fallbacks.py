"""
Deterministic last-resort tiers for sparse or degenerate dictionaries.
"""

from __future__ import annotations

from typing import Optional

from packages.engine import connected_pair
from .base import BaseTier, Challenge, GenerationContext, register


@register
class ConnectedPairTier(BaseTier):
    """Any two words one letter apart: a one-move puzzle."""
    id = "connected_pair"
    name = "First connected pair"

    def propose(self, ctx: GenerationContext) -> Optional[Challenge]:
        pair = connected_pair(ctx.neighbors)
        if pair is None:
            return None
        start, end = pair
        return Challenge(start, end, (start, end), tier=self.id)


@register
class DegenerateTier(BaseTier):
    """No word has a neighbor: start == target, already solved."""
    id = "degenerate"
    name = "Single word"

    def propose(self, ctx: GenerationContext) -> Optional[Challenge]:
        if not ctx.words:
            return None
        w = ctx.words[0]
        return Challenge(w, w, (w,), tier=self.id)
