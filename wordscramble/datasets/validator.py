"""
Root-word list validator for wordscramble.

What this module does:
- Validate a root-word list (e.g. start.txt): the pool the game draws root words from.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_word_pool, pretty_summary
    rep = validate_word_pool("data/start.txt", min_length=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble.engine.rules import MIN_WORD_LENGTH


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class PoolReport:
    """Diagnostics and metadata for one word-pool file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest accepted root word
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    # utf-8-sig: a leading BOM is dropped, matching read_lines()
    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            # require already-lowercase & alphabetic & long enough
            if wl == w and wl.isascii() and wl.isalpha() and len(wl) >= min_length:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_word_pool(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Shortest acceptable root word. A root shorter than the minimum
        answer length can never yield an accepted word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see PoolReport schema) with counts,
        SHA-256, invalid/duplicate diagnostics, a strict `passed` flag
        (non-empty, no invalid lines, no duplicates) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(PoolReport(path, False, min_length, 0, "", 0, 0, False, issues))

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    passed = bool(words) and invalid == 0 and len(words) == len(unique)

    rep = PoolReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        pool=data/start.txt | words=3000 (uniq=3000, sha=abc123...) | min_length=8 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"pool={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| min_length={report['min_length']} | {status}"
    )
