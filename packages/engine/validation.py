"""
Candidate validation pipeline.

This module answers the question: "Can this word be added right now?"
A normalized candidate is accepted iff, checked in this exact order:
  1) it is non-empty                                  -> else INVALID
  2) it has at least MIN_WORD_LENGTH characters       -> else TOO_SHORT
  3) it is not already among the used words           -> else NOT_ORIGINAL
  4) its letters fit inside the root word's letters   -> else NOT_POSSIBLE
  5) the dictionary oracle recognizes it              -> else NOT_REAL

The first failing check wins; only one reason is ever reported.
Checks 1-4 are local and cheap. The oracle may be a file lookup or a remote
service, so it always runs last and only for candidates that survived the
rest.

Errors raised by the oracle are NOT caught here; the session decides how to
surface them.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from .letters import is_spellable
from .reasons import Accepted, Rejected, RejectionReason

# Single source of truth for the shortest acceptable word.
MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


def precheck(candidate: str, root_word: str, used_words: Sequence[str]) -> Rejected | None:
    """
    Run the local checks (1-4). Returns the first rejection, or None if the
    candidate still needs the dictionary check.

    Args:
      candidate  : normalized candidate (see letters.normalize)
      root_word  : current root word
      used_words : words accepted so far this round
    """
    if len(candidate) == 0:
        return Rejected(RejectionReason.INVALID)

    if len(candidate) < MIN_WORD_LENGTH:
        return Rejected(RejectionReason.TOO_SHORT)

    if candidate in used_words:
        return Rejected(RejectionReason.NOT_ORIGINAL)

    # The root word itself passes here; it is not special-cased.
    if not is_spellable(candidate, root_word):
        return Rejected(RejectionReason.NOT_POSSIBLE)

    return None


def validate(
        candidate: str,
        root_word: str,
        used_words: Sequence[str],
        oracle,
        language: str = DEFAULT_LANGUAGE,
) -> Accepted | Rejected:
    """
    Run the full pipeline against `oracle` (any object with
    is_real_word(word, language) -> bool).

    Returns Accepted(candidate) or Rejected(reason). The returned Accepted
    carries no used-word list; the session fills that in once it has
    recorded the word.
    """
    rejected = precheck(candidate, root_word, used_words)
    if rejected is not None:
        return rejected

    return check_real(candidate, oracle, language)


async def validate_async(
        candidate: str,
        root_word: str,
        used_words: Sequence[str],
        oracle,
        language: str = DEFAULT_LANGUAGE,
) -> Accepted | Rejected:
    """
    Same pipeline as `validate`, but the dictionary lookup is awaited.
    Checks 1-4 never suspend.
    """
    rejected = precheck(candidate, root_word, used_words)
    if rejected is not None:
        return rejected

    return await check_real_async(candidate, oracle, language)


def check_real(candidate: str, oracle, language: str = DEFAULT_LANGUAGE) -> Accepted | Rejected:
    """Check 5 on its own. Oracle errors propagate to the caller."""
    if not oracle.is_real_word(candidate, language):
        return Rejected(RejectionReason.NOT_REAL)
    return Accepted(candidate)


async def check_real_async(candidate: str, oracle,
                           language: str = DEFAULT_LANGUAGE) -> Accepted | Rejected:
    """
    Awaitable check 5. Oracles exposing `is_real_word_async` are awaited
    directly; plain ones run in a worker thread so a slow lookup does not
    block the event loop.
    """
    lookup = getattr(oracle, "is_real_word_async", None)
    if lookup is not None:
        real = await lookup(candidate, language)
    else:
        real = await asyncio.to_thread(oracle.is_real_word, candidate, language)

    if not real:
        return Rejected(RejectionReason.NOT_REAL)
    return Accepted(candidate)
