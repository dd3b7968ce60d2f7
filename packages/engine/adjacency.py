"""
Neighbor index over a dictionary.

Two words are neighbors when a single-letter substitution turns one into the
other. The index is built once per dictionary so that the many BFS calls made
while generating a puzzle only pay O(degree) per expansion.

Ordering:
  Each neighbor list follows the substitution loop order: position ascending,
  then letter ascending (a..z). This makes BFS tie-breaks reproducible for a
  given dictionary.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, List, Optional, Tuple

from .words import ALPHABET

Neighbors = Dict[str, List[str]]


def word_neighbors(word: str, dictionary: AbstractSet[str]) -> List[str]:
    """All dictionary words one substitution away from `word`."""
    out: List[str] = []
    for i in range(len(word)):
        head, tail = word[:i], word[i + 1:]
        for ch in ALPHABET:
            if ch == word[i]:
                continue  # identity substitution
            candidate = head + ch + tail
            if candidate in dictionary:
                out.append(candidate)
    return out


def build_neighbors(dictionary: AbstractSet[str]) -> Neighbors:
    """
    Precompute the neighbor list of every word (isolated words map to []).

    Cost: O(|dictionary| * L * 26) set lookups.
    """
    return {w: word_neighbors(w, dictionary) for w in dictionary}


def connected_pair(neighbors: Neighbors) -> Optional[Tuple[str, str]]:
    """
    First (word, neighbor) pair in sorted word order, or None if every word
    is isolated.
    """
    for w in sorted(neighbors):
        nbrs = neighbors[w]
        if nbrs:
            return w, nbrs[0]
    return None
