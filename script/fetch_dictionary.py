"""
Download a plain-text English word list for the wordlist oracle.

What it does:
- Downloads a newline-delimited word list.
- Lowercases, keeps a–z tokens only, de-duplicates while preserving order.
- Writes one word per line.

Usage:
    python -m script.fetch_dictionary --out packages/datasets/data/dictionary.txt
"""

import argparse
import re

import requests

from packages.datasets.io import write_lines, DATA_DIR

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = [ln.strip().lower() for ln in r.text.splitlines()]
    return unique_preserve_order(w for w in words if WORD_RE.match(w))


def main():
    ap = argparse.ArgumentParser(description="Download a dictionary word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DATA_DIR / "dictionary.txt"))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")

if __name__ == "__main__":
    main()
