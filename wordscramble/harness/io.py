"""
I/O utilities for analysis runs.

Responsibilities:
- write_csv:     flatten per-root results into a tidy CSV (one row per root word).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["root", "num_words", "max_score", "longest", "time_ms", "words"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of root analyses to CSV.

    Schema (columns):
      root, num_words, max_score, longest, time_ms, words
    where `words` is the space-separated accepted word list.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "root": r["root"],
                "num_words": r["num_words"],
                "max_score": r["max_score"],
                "longest": r.get("longest", ""),
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
                "words": " ".join(r.get("words", [])),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, paths, seed, sample, outdir)
      - word_pool: output of datasets.validate_word_pool(...)
      - num_roots: number of root words analyzed
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
