"""
Game session: one player, one round at a time.

- start_new_round: draw a root word from the pool and reset the round.
- submit:          normalize + validate a candidate, record it if accepted.
- submit_async:    same, with the dictionary lookup awaited.

Round state (root word, used words, pending candidate) only changes through
these methods. Rejections are returned, never raised, and never touch the
used-word list. A dictionary fault surfaces as Rejected(UNKNOWN).

The session is UI-agnostic: a terminal app, a notebook, or a web handler can
drive it without changes.
"""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from packages.engine import (
    Accepted, Rejected, RejectionReason, DEFAULT_LANGUAGE,
    normalize, precheck, check_real, check_real_async,
)

logger = logging.getLogger(__name__)


class EmptyPoolError(ValueError):
    """start_new_round was given no words to choose from."""


class GameSession:
    """
    Holds the state of the current round and mediates submissions.

    Args:
        oracle:    object with is_real_word(word, language) -> bool
        language:  language passed to the oracle
        seed:      RNG seed to make root word draws reproducible
    """

    def __init__(self, oracle, *, language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.oracle = oracle
        self.language = language
        self.rng = random.Random(seed)

        # round state
        self._root_word = ""
        self._used_words: List[str] = []
        self._pending: str | None = None

    # ---- read-only views ----

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        """Accepted words, most recent first."""
        return tuple(self._used_words)

    @property
    def pending(self) -> str | None:
        """The candidate currently being validated, if any."""
        return self._pending

    # ---- mutation points ----

    def start_new_round(self, word_pool: Sequence[str]) -> str:
        """
        Pick a root word uniformly at random and reset the round.
        Returns the new root word.
        """
        pool = [w.strip().lower() for w in word_pool if w.strip()]
        if not pool:
            raise EmptyPoolError("cannot start a round from an empty word pool")

        root = pool[self.rng.randrange(len(pool))]

        # Root and used words are replaced together.
        self._root_word, self._used_words, self._pending = root, [], None
        logger.info("New round: root word '%s' (pool of %d)", root, len(pool))
        return root

    def submit(self, raw_input: str) -> Accepted | Rejected:
        """
        Validate a raw player input against the current round.

        Returns:
            Accepted(word, used_words) with the list after insertion, or
            Rejected(reason) with state unchanged.
        """
        candidate = self._begin(raw_input)
        try:
            result = precheck(candidate, self._root_word, self._used_words)
            if result is None:
                try:
                    result = check_real(candidate, self.oracle, self.language)
                except Exception:
                    logger.exception("Dictionary lookup failed for '%s'", candidate)
                    result = Rejected(RejectionReason.UNKNOWN)
        finally:
            self._pending = None
        return self._finish(result)

    async def submit_async(self, raw_input: str) -> Accepted | Rejected:
        """
        Like submit, but awaits the dictionary lookup.

        Used words are updated only after the lookup returns, so a submission
        cancelled while waiting on the oracle leaves the round untouched.
        """
        candidate = self._begin(raw_input)
        try:
            result = precheck(candidate, self._root_word, self._used_words)
            if result is None:
                try:
                    result = await check_real_async(candidate, self.oracle, self.language)
                except Exception:
                    logger.exception("Dictionary lookup failed for '%s'", candidate)
                    result = Rejected(RejectionReason.UNKNOWN)
        finally:
            self._pending = None
        return self._finish(result)

    # ---- helpers ----

    def _begin(self, raw_input: str) -> str:
        if not self._root_word:
            raise RuntimeError("no round in progress; call start_new_round first")
        self._pending = normalize(raw_input)
        return self._pending

    def _finish(self, result: Accepted | Rejected) -> Accepted | Rejected:
        if isinstance(result, Rejected):
            logger.debug("Rejected (%s) against root '%s'", result.reason.value, self._root_word)
            return result

        self._used_words.insert(0, result.word)
        logger.info("Accepted '%s' (%d words this round)", result.word, len(self._used_words))
        return Accepted(result.word, self.used_words)
