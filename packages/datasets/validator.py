"""
Word pool validator for Word Scramble.

What this module does:
- Validate a root word pool (start.txt): one word per line.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

A failing report is a warning, not a fatal error: the game only refuses to
start when the pool cannot be loaded at all (see io.load_word_pool).

Typical use:
    from packages.datasets import validate_word_pool, pretty_summary
    rep = validate_word_pool("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import MIN_WORD_LENGTH


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class PoolReport:
    """Diagnostics and metadata for one word pool file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
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

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            if wl == w and wl.isalpha() and wl.isascii() and len(wl) >= min_length:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_word_pool(path: Path | str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root word pool.

    Parameters
    ----------
    path : str | Path
        Pool file (one word per line).
    min_length : int
        Shortest acceptable root word; a root shorter than the minimum
        candidate length could never yield an accepted word except itself.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see PoolReport schema). `passed` is
        strict: requires an existing, non-empty file with no invalid lines.
    """
    p = Path(path)
    if not p.exists():
        rep = PoolReport(str(path), False, min_length, 0, "", 0, 0, False,
                         [f"word pool not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word pool contains 0 valid words")
    if invalid:
        issues.append(f"word pool has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word pool contains duplicate lines")

    rep = PoolReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        pool=start.txt | words=120 (uniq=120, sha=abc123...) | min_len=3 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"pool={name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
