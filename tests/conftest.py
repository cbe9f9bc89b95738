from pathlib import Path

import pytest

from hangman.datasets import WordIndex
from hangman.harness import SAMPLE_WORDS

# Six-letter words ending in their only 'E' (the "-----E" bucket), chosen so
# that CATTLE plays out as: E, I (miss), A, L, D (miss), R (miss), T, W (miss), CATTLE.
#   - 14 words with an 'I' and no 'A' beat the 12 words with an 'A'
#   - each group below is what the next guess eliminates
ENDS_IN_E = [
    # removed by the 'I' miss
    "INSIDE", "TWINGE", "BODICE", "UNIQUE", "BISQUE", "NOTICE", "OFFICE",
    "NOVICE", "CHOICE", "INVOKE", "SMIDGE", "MISUSE", "DIVIDE", "TRIOSE",
    # removed once 'A' shows at position 1 only
    "BOUNCE", "THRONE", "STANCE",
    # removed once 'L' shows at position 4 only
    "MASQUE", "LAUNCE",
    # removed by the 'D' miss
    "HANDLE", "CANDLE", "SADDLE", "PADDLE",
    # removed by the 'R' miss
    "RABBLE", "MARBLE", "WARBLE",
    # removed by the 'W' miss, then the answer
    "WATTLE", "CATTLE",
]

OTHER_WORDS = [
    "SETTLE", "METTLE", "BEETLE", "HELMET", "BETTING", "LETTING", "SETTLED",
    "BILL", "DILL", "FILL", "HILL", "CAT", "A",
]

FIXTURE_WORDS = ENDS_IN_E + OTHER_WORDS + [w for w in SAMPLE_WORDS if w not in ENDS_IN_E]


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """Fixture dictionary on disk, lower-cased like most word lists."""
    p = tmp_path / "words.txt"
    _write(p, [w.lower() for w in FIXTURE_WORDS])
    return p


@pytest.fixture
def index(words_file: Path) -> WordIndex:
    return WordIndex(str(words_file), "E")
