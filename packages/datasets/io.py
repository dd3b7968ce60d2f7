"""
Word-list files.

read_words keeps the loader's rule (trim, lowercase, N letters a–z) but,
unlike engine.load_dictionary, preserves file order and raises on a missing
file, which is what the maintenance scripts want.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine import normalize_word
from packages.engine.words import is_word_shape


def read_words(p: Path | str, N: int) -> List[str]:
    """
    N-letter words from a UTF-8 list, first occurrence order, no duplicates.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    seen, out = set(), []
    for raw in p.read_text(encoding="utf-8").splitlines():
        w = normalize_word(raw)
        if is_word_shape(w, N) and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def write_wordlist(words: Iterable[str], p: Path | str, *, sort: bool = True) -> int:
    """
    Write unique words one per line (sorted unless sort=False); parent dirs
    are created. Returns the number of words written.
    """
    unique = list(dict.fromkeys(words))
    if sort:
        unique.sort()

    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(w + "\n" for w in unique), encoding="utf-8")
    return len(unique)
