# apps/cli/generate.py
"""
CLI entry point for generating word-ladder puzzles in bulk.

This script:
  1) Validates the word list (prints counts + SHA, connected/isolated words).
  2) Builds the neighbor index once.
  3) Generates a batch of challenges with a live progress indicator and writes:
       - CSV:  one row per puzzle (endpoints, tier, optimal steps, ladder)
       - JSON: manifest with config, word-list report, batch summary, git commit
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary
from packages.engine import build_neighbors, load_dictionary
from packages.engine.words import BUNDLED_WORDLIST, DEFAULT_WORD_LENGTH
from packages.game import DifficultyLevel
from packages.generators import describe_tiers
from packages.harness import run_batch, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    ap = argparse.ArgumentParser(description="wordgolf — generate puzzles in bulk")
    ap.add_argument("--difficulty", default="4",
                    help="max player steps (2-7) or 'unlimited'")
    ap.add_argument("--count", type=int, default=100, help="number of puzzles")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--wordlist", default=str(BUNDLED_WORDLIST), help="path to word list")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    level = DifficultyLevel.from_value(args.difficulty)
    if level is None:
        raise SystemExit(f"Unknown difficulty: {args.difficulty}")

    # 1) Validate word list
    rep = validate_wordlist(args.N, args.wordlist)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"Word list not found: {args.wordlist}")

    # 2) Load + index
    dictionary = load_dictionary(args.wordlist, args.N)
    neighbors = build_neighbors(dictionary)

    # 3) Generate
    progress = None
    if args.progress == "bar":
        progress = lambda it: tqdm(it, ncols=80, desc="Generating", unit="puzzle")  # noqa: E731
    results = run_batch(sorted(dictionary), neighbors, level, args.count,
                        seed=args.seed, progress=progress)
    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"puzzles_{run_id}.csv"
    manifest_path = outdir / f"puzzles_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"{summary.get('num_cases', 0)} puzzles | mean steps={summary.get('mean_steps', 0)} "
          f"| on-target={summary.get('on_target_rate', 0)}")
    print(f"tiers: {describe_tiers(summary.get('tiers', {}))}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
