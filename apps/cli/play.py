# apps/cli/play.py
"""
CLI entry point for playing Word Scramble in a terminal.

This script:
  1) Validates the root word pool (prints counts + SHA) and loads it.
     An unreadable or empty pool is fatal.
  2) Builds the requested dictionary oracle and a game session.
  3) Runs the input loop: every line is a submission, except
       /restart  -> draw a new root word and clear the list
       /quit     -> exit (EOF works too)
     Accepted words are listed most recent first; rejections print an
     alert (title + message).

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --oracle remote --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List

from packages.datasets import (
    validate_word_pool, pretty_summary, load_word_pool, WordPoolError, DEFAULT_POOL,
)
from packages.engine import DEFAULT_LANGUAGE, Rejected
from packages.oracle import create_oracle, get_oracle_ids
from packages.oracle.remote import DEFAULT_API_URL
from packages.oracle.wordlist import DEFAULT_DICTIONARY
from packages.session import GameSession

RESTART = "/restart"
QUIT = "/quit"


def _render_round(session: GameSession) -> None:
    """Root word heading followed by the numbered used-word list."""
    print(f"\n== {session.root_word} ==")
    for i, w in enumerate(session.used_words, 1):
        print(f"  {i}. {w}")


def _render_alert(title: str, message: str) -> None:
    print(f"[{title}] {message}")


def play(session: GameSession, pool: List[str], lines: Iterable[str]) -> int:
    """
    Drive one session from an iterable of input lines.
    Returns the number of words accepted in the final round.
    """
    session.start_new_round(pool)
    _render_round(session)

    for line in lines:
        cmd = line.strip()
        if cmd == QUIT:
            break
        if cmd == RESTART:
            session.start_new_round(pool)
            _render_round(session)
            continue

        result = session.submit(line)
        if isinstance(result, Rejected):
            _render_alert(*result.alert(session.root_word))
        else:
            _render_round(session)

    return len(session.used_words)


def _stdin_lines(prompt: str = "> ") -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load the pool, build the oracle, and play until quit.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="Word Scramble: make words from a root word")
    ap.add_argument("--pool", default=str(DEFAULT_POOL),
                    help="path to root word pool (one word per line)")
    ap.add_argument("--oracle", default="wordlist",
                    help=f"dictionary oracle id (one of: {oracle_choices})")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="dictionary file for the wordlist oracle")
    ap.add_argument("--api-url", default=DEFAULT_API_URL,
                    help="URL template for the remote oracle ({language}, {word})")
    ap.add_argument("--timeout", type=float, default=10.0,
                    help="remote oracle timeout in seconds")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language")
    ap.add_argument("--seed", type=int, help="RNG seed for root word draws")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Pool report + load (fatal on failure)
    print(pretty_summary(validate_word_pool(args.pool)))
    try:
        pool = load_word_pool(args.pool)
    except WordPoolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # 2) Oracle + session
    if args.oracle == "wordlist":
        oracle = create_oracle("wordlist", path=args.dictionary, language=args.language)
    elif args.oracle == "remote":
        oracle = create_oracle("remote", api_url=args.api_url, timeout=args.timeout)
    else:
        oracle = create_oracle(args.oracle)
    session = GameSession(oracle, language=args.language, seed=args.seed)

    # 3) Play
    print(f"Type words made from the root word. {RESTART} for a new word, {QUIT} to exit.")
    play(session, pool, _stdin_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())
