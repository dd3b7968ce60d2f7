"""
Dictionary loading.

A dictionary is a frozenset of lowercase words that all share one length N.
Sources are UTF-8 text files with one word per line; anything that isn't a
clean N-letter a–z token after trimming is dropped.

Loading never raises: a missing or unreadable source is logged and yields an
empty dictionary, which callers treat as "no playable words".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 4

# Bundled default list shipped with the datasets package.
BUNDLED_WORDLIST = Path(__file__).resolve().parent.parent / "datasets" / "data" / "words_4.txt"

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_ALPHABET_SET = frozenset(ALPHABET)


def normalize_word(text: str) -> str:
    """Canonical form of user/file input: trimmed and lowercased."""
    return text.strip().lower()


def is_word_shape(word: str, N: int) -> bool:
    """True if `word` (already normalized) is exactly N letters a–z."""
    return len(word) == N and all(ch in _ALPHABET_SET for ch in word)


def parse_words(lines: Iterable[str], N: int) -> FrozenSet[str]:
    """
    Normalize raw lines and keep the N-letter words, deduplicated.
    Blank lines are ignored.
    """
    out = set()
    for raw in lines:
        w = normalize_word(raw)
        if w and is_word_shape(w, N):
            out.add(w)
    return frozenset(out)


def load_dictionary(source: Path | str | None = None, N: int = DEFAULT_WORD_LENGTH) -> FrozenSet[str]:
    """
    Load the words of length N from `source` (None -> bundled list).

    Returns an empty frozenset if the source can't be read.
    """
    p = Path(source) if source is not None else BUNDLED_WORDLIST
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading dictionary %s: %s", p, e)
        return frozenset()

    words = parse_words(text.splitlines(), N)
    if not words:
        logger.warning("Dictionary %s contains no %d-letter words", p, N)
    else:
        logger.debug("Loaded %d %d-letter words from %s", len(words), N, p)
    return words
