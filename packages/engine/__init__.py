from .letters import normalize, letter_counts, is_spellable
from .reasons import RejectionReason, Accepted, Rejected, alert_for
from .validation import (
    validate, validate_async, precheck, check_real, check_real_async,
    MIN_WORD_LENGTH, DEFAULT_LANGUAGE,
)

__all__ = [
    "normalize", "letter_counts", "is_spellable",
    "RejectionReason", "Accepted", "Rejected", "alert_for",
    "validate", "validate_async", "precheck", "check_real", "check_real_async",
    "MIN_WORD_LENGTH", "DEFAULT_LANGUAGE",
]
