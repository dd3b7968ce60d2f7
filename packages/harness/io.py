"""
I/O utilities for puzzle batches.

Responsibilities:
- write_csv:      one row per generated puzzle.
- write_manifest: dump a JSON manifest with config, word-list report and stats.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["start", "target", "difficulty", "tier", "optimal_steps", "on_target",
              "time_ms", "path"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of generated puzzles to CSV.

    The ladder is written as a single space-separated `path` column.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "start": r["start"],
                "target": r["target"],
                "difficulty": r["difficulty"],
                "tier": r["tier"],
                "optimal_steps": r["optimal_steps"],
                "on_target": r["on_target"],
                "time_ms": round(float(r["time_ms"]), 3),
                "path": " ".join(r["path"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (difficulty, count, wordlist, seed, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
