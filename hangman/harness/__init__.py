from .core import run_case, run_batch, score_sample_words, to_stat_block, format_results, StatBlock
from .core import SAMPLE_WORDS, TEST_WORD, DEFAULT_MAX_WRONG_GUESSES
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats, mismatches

__all__ = [
    "run_case", "run_batch", "score_sample_words", "to_stat_block", "format_results", "StatBlock",
    "SAMPLE_WORDS", "TEST_WORD", "DEFAULT_MAX_WRONG_GUESSES",
    "write_csv", "write_manifest",
    "summarize", "pretty_stats", "mismatches",
]
