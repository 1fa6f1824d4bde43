"""
Static word-list oracle.

A word is real iff it appears (case-insensitively) in a newline-delimited
dictionary file, or in an explicit iterable of words. The list answers for a
single language only; asking about any other language is an oracle fault,
not a "no".

Typical use:
    oracle = WordListOracle(path="packages/datasets/data/dictionary.txt")
    oracle.is_real_word("silent", "en")  # -> True
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import read_lines, DATA_DIR
from .base import BaseOracle, OracleError, register

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = DATA_DIR / "dictionary.txt"


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Iterable[str] | None = None, *,
                 path: Path | str | None = None, language: str = "en"):
        if words is None:
            path = Path(path) if path is not None else DEFAULT_DICTIONARY
            logger.debug("Loading dictionary from %s", path)
            words = read_lines(path)

        # Build the set once; membership is checked on every submission.
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        self.language = language
        logger.info("Word list oracle ready: %d words (%s)", len(self.words), language)

    def __len__(self) -> int:
        return len(self.words)

    def is_real_word(self, word: str, language: str) -> bool:
        if language != self.language:
            raise OracleError(
                f"Dictionary only covers '{self.language}', not '{language}'")
        return word.strip().lower() in self.words
