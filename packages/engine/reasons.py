"""
Outcomes of a single validation.

A submission ends in exactly one of:
  - Accepted(word, used_words): the word was added; `used_words` is the list
    after insertion (most recent first)
  - Rejected(reason): nothing changed; `reason` is a RejectionReason

Rejection kinds carry no payload. The alert shown to the player is derived
from the kind plus the current root word when it is displayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class RejectionReason(Enum):
    INVALID = "invalid"
    TOO_SHORT = "too_short"
    NOT_ORIGINAL = "not_original"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"
    # The dictionary failed to answer at all (network error, bad language, ...)
    UNKNOWN = "unknown"


# kind -> (title, message template); "{root}" is filled with the root word
ALERTS: Dict[RejectionReason, Tuple[str, str]] = {
    RejectionReason.INVALID: ("Word is Invalid", "You should Enter something"),
    RejectionReason.TOO_SHORT: ("To Short", "Word length should be atleast 3"),
    RejectionReason.NOT_ORIGINAL: ("Word used already", "Be more original"),
    RejectionReason.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_REAL: ("Word not recognized", "You can't just make them up, you know!"),
    RejectionReason.UNKNOWN: ("Sorry", "Something went wrong!"),
}


def alert_for(reason: RejectionReason, root_word: str) -> Tuple[str, str]:
    """
    Title/message pair for a rejection.

    Example:
      alert_for(RejectionReason.NOT_POSSIBLE, "crane")
        -> ("Word not possible", "You can't spell that word from 'crane'!")
    """
    title, template = ALERTS[reason]
    return title, template.format(root=root_word)


@dataclass(frozen=True)
class Accepted:
    word: str
    used_words: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason

    @property
    def ok(self) -> bool:
        return False

    def alert(self, root_word: str) -> Tuple[str, str]:
        return alert_for(self.reason, root_word)
