"""
Letter-multiset helpers for a single (candidate, root) pair.

Conventions:
  - words are compared after normalization (trimmed, lowercase)
  - a root word is treated as a bag of letters; each letter may be used
    at most as many times as it appears in the root

Algorithm (running count):
  1) Count every character of the root word.
  2) Walk the candidate, consuming one instance per character.
  3) The first count that drops below zero means the candidate asked for a
     letter the root does not have (or not that many times).
"""

from collections import Counter


def normalize(raw: str) -> str:
    """
    Canonical form of a player's input: surrounding whitespace/newlines
    trimmed, lowercased.

    Examples:
      normalize("  Silent\\n") -> "silent"
      normalize("SILENT")      -> "silent"
    """
    return raw.strip().lower()


def letter_counts(word: str) -> Counter:
    """Frequency table of every character in `word`."""
    return Counter(word)


def is_spellable(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root`.

    Examples:
      is_spellable("silent", "listen") -> True
      is_spellable("cc", "crane")      -> False  (only one 'c')
      is_spellable("crane", "crane")   -> True   (the root spells itself)
    """
    remaining = letter_counts(root)
    for ch in word:
        remaining[ch] -= 1  # Counter yields 0 for letters absent from root
        if remaining[ch] < 0:
            return False
    return True
