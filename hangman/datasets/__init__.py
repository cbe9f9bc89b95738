from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_words, write_lines
from .word_index import WordIndex, WordListError, clean_words, MAX_WORD_LENGTH, DEFAULT_INDEX_LETTER

__all__ = [
    "validate_wordlist", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "WordIndex", "WordListError", "clean_words", "MAX_WORD_LENGTH", "DEFAULT_INDEX_LETTER",
]
