# apps/cli/solve.py
"""
Find the shortest ladder between any two words.

Usage:
    python -m apps.cli.solve head tail
    python -m apps.cli.solve cold warm --wordlist my_words.txt --max-depth 8
"""

from __future__ import annotations

import argparse
import logging

from packages.engine import build_neighbors, load_dictionary
from packages.engine.words import DEFAULT_WORD_LENGTH
from packages.solver import solve


def main():
    ap = argparse.ArgumentParser(description="wordgolf — shortest word ladder")
    ap.add_argument("start")
    ap.add_argument("end")
    ap.add_argument("--wordlist", help="path to word list (default: bundled)")
    ap.add_argument("--N", type=int, help="word length (default: length of START)")
    ap.add_argument("--max-depth", type=int, default=None, help="BFS depth cap (default: none)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    N = args.N or len(args.start.strip()) or DEFAULT_WORD_LENGTH
    dictionary = load_dictionary(args.wordlist, N)
    if not dictionary:
        raise SystemExit("Error loading dictionary")

    result = solve(args.start, args.end, build_neighbors(dictionary), max_depth=args.max_depth)
    if not result.ok:
        raise SystemExit(result.error)

    print(" → ".join(result.path))
    print(f"{result.steps} step(s)")


if __name__ == "__main__":
    main()
