from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Bundled word lists live next to this module.
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_POOL = DATA_DIR / "start.txt"


class WordPoolError(RuntimeError):
    """The root word pool could not be loaded; the game cannot start."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_word_pool(p: Path | str | None = None) -> List[str]:
    """
    Load the root word pool (one word per line), lowercased, blanks dropped.
    Defaults to the bundled start.txt.

    Raises WordPoolError if the file is missing, unreadable, or holds no words.
    """
    p = Path(p) if p is not None else DEFAULT_POOL
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise WordPoolError(f"cannot read word pool {p}: {e}") from e

    words = [w.strip().lower() for w in lines if w.strip()]
    if not words:
        raise WordPoolError(f"word pool {p} contains no words")
    return words
