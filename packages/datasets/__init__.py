from .validator import validate_word_pool, pretty_summary
from .io import read_lines, write_lines, load_word_pool, WordPoolError, DATA_DIR, DEFAULT_POOL

__all__ = ["validate_word_pool", "pretty_summary", "load_word_pool", "WordPoolError"]
