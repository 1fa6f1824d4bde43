"""
Build a root word pool from a larger dictionary file.

Features:
- Keeps only lowercase a–z words of an exact length (default 8).
- Preserves original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical).
- Writes to --out (default: the bundled start.txt).

Usage:
    python -m script.build_pool --in words.txt --length 8 --sort
"""

import argparse
import re
from pathlib import Path

from packages.datasets.io import read_lines, write_lines, DEFAULT_POOL

WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def pool_words(lines: list[str], length: int) -> list[str]:
    """Normalize, keep exact-length alphabetic words, dedupe."""
    words = [ln.strip().lower() for ln in lines]
    words = [w for w in words if len(w) == length and WORD_RE.match(w)]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a root word pool from a dictionary file.")
    ap.add_argument("--in", dest="inp", required=True, help="input dictionary .txt file")
    ap.add_argument("--out", dest="out", default=str(DEFAULT_POOL), help="output pool file")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    lines = read_lines(Path(args.inp))
    out = pool_words(lines, args.length)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
