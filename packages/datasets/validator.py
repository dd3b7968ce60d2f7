"""
Word-list validator for wordgolf.

What this module does:
- Check a word list against the file format the game loads: one word per line,
  a–z only, exact length N (case and surrounding whitespace are tolerated by the
  loader, so they're counted but not fatal).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Build the neighbor graph and report how playable the list is: words with no
  neighbor can never appear in a ladder.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(4, "packages/datasets/data/words_4.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import build_neighbors, connected_pair
from packages.engine.words import is_word_shape, normalize_word


@dataclass
class WordListReport:
    N: int
    path: str
    exists: bool
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    count: int            # valid words, duplicates included
    unique_count: int
    invalid_lines: int    # non-blank lines that aren't N-letter words
    blank_lines: int
    connected_words: int  # words with at least one neighbor
    isolated_words: int
    isolated_sample: List[str] = field(default_factory=list)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = normalize_word(raw)
            if not w:
                blank += 1
            elif is_word_shape(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for ladders of length N.

    `passed` is strict about what would break play: the file must exist and
    at least one pair of words must be connected. Invalid lines, duplicates and
    isolated words are reported as issues but don't fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordListReport(N, path, False, "", 0, 0, 0, 0, 0, 0, issues=issues))

    try:
        words, invalid, blank = _load_and_check(p, N)
    except UnicodeDecodeError as e:
        issues.append(f"word list is not valid UTF-8: {e.reason} at byte {e.start}")
        return asdict(WordListReport(N, str(p), True, _sha256_file(p), 0, 0, 0, 0, 0, 0,
                                     issues=issues))
    unique = sorted(set(words))
    neighbors = build_neighbors(frozenset(unique))
    isolated = [w for w in unique if not neighbors[w]]

    if not unique:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate(s)")
    if isolated:
        issues.append(f"{len(isolated)} isolated word(s) (e.g., {isolated[:5]})")

    playable = connected_pair(neighbors) is not None
    if unique and not playable:
        issues.append("no two words are one letter apart; only trivial puzzles possible")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
        connected_words=len(unique) - len(isolated),
        isolated_words=len(isolated),
        isolated_sample=isolated[:5],
        passed=playable,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        N=4 | words=812 (uniq=812, sha=abc123...) | connected=790 isolated=22 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| connected={report['connected_words']} isolated={report['isolated_words']} | {status}"
    )
