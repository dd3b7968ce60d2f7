"""
Normalize an existing word list in place (or to --out).

- Trims and lowercases every line, drops blanks.
- Keeps only a–z words of length N (the same rule the game loader applies).
- Removes duplicates; output is sorted unless --keep-order is given.
- Optionally drops isolated words (no one-letter neighbor), which can never be
  part of a ladder.

Usage:
    python -m script.clean_wordlist --in packages/datasets/data/words_4.txt --drop-isolated
"""

import argparse
from pathlib import Path

from packages.datasets import read_words, write_wordlist
from packages.engine import build_neighbors


def main():
    ap = argparse.ArgumentParser(description="Clean up a word list for wordgolf.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=4, help="word length to keep")
    ap.add_argument("--keep-order", action="store_true", help="don't sort the output")
    ap.add_argument("--drop-isolated", action="store_true",
                    help="remove words with no one-letter neighbor")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = read_words(inp, args.N)

    if args.drop_isolated:
        neighbors = build_neighbors(frozenset(words))
        words = [w for w in words if neighbors[w]]
    n = write_wordlist(words, outp, sort=not args.keep_order)
    print(f"Input: {inp} -> Output: {outp} ({n} words)")


if __name__ == "__main__":
    main()
