from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Bundled word lists live next to this module.
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"
DEFAULT_DICTIONARY = DATA_DIR / "dictionary.txt"


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated UTF-8 word list: strip, lowercase, drop blanks.
    Order and duplicates are kept. Raises FileNotFoundError if missing.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.strip().lower() for ln in p.read_text(encoding="utf-8").splitlines() if ln.strip()]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line with a trailing newline, creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
