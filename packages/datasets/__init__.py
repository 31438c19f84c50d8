from .validator import validate_wordlists, pretty_summary
from .io import DATA_DIR, DEFAULT_DICTIONARY, DEFAULT_START_WORDS, read_words, write_words
from .roots import DEFAULT_ROOT_WORD, RootWordSource
from .playability import playable_words, playability_report

__all__ = [
    "validate_wordlists", "pretty_summary",
    "DATA_DIR", "DEFAULT_DICTIONARY", "DEFAULT_START_WORDS", "read_words", "write_words",
    "DEFAULT_ROOT_WORD", "RootWordSource",
    "playable_words", "playability_report",
]
