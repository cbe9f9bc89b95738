"""
Dictionary index bucketed for the first Hangman guess.

Every strategy built on this index opens with the same letter (the index
letter, 'E' by default). The first thing a game reveals is therefore the
position of that letter's first occurrence, or its absence. Words are stored
under (length, first position of the index letter), so the opening candidate
set is a single lookup instead of a dictionary scan.

Layout:
  _by_length[length]             -> list of length + 1 buckets
  _by_length[length][pos + 1]    -> set of words (pos == -1 when absent)

Both levels are fixed-size lists created lazily and never resized. The index
is filled once in the constructor and read-only afterwards, so one instance
can be shared by any number of strategies (and threads).

With a typical English word list and 'E' as index letter the largest bucket
is 8-letter words without an 'E'.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Longest non-coined word in standard dictionaries.
MAX_WORD_LENGTH = 35

# Most common letter in English; guessed first and used to bucket words.
DEFAULT_INDEX_LETTER = "E"

_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_EMPTY: FrozenSet[str] = frozenset()

WordSource = Union[str, Path, Iterable[str]]


def clean_words(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield each line as an upper-cased word, skipping blank lines.

    Raises ValueError naming the line for anything but 1..MAX_WORD_LENGTH
    letters A-Z.
    """
    for lineno, raw in enumerate(lines, start=1):
        word = raw.strip().upper()
        if not word:
            continue
        if len(word) > MAX_WORD_LENGTH:
            raise ValueError(
                f"line {lineno}: word longer than {MAX_WORD_LENGTH} letters: {raw.strip()!r}")
        if not all(ch in _ALPHABET for ch in word):
            raise ValueError(f"line {lineno}: word must be letters A-Z only: {raw.strip()!r}")
        yield word


class WordListError(OSError):
    """
    A word file could not be read or closed.

    `phase` is "read" or "close"; the underlying error is chained as
    __cause__.
    """

    def __init__(self, message: str, *, phase: str, path: str = ""):
        super().__init__(message)
        self.phase = phase
        self.path = path


class WordIndex:
    """
    Word list partitioned by (length, position of first index letter).
    """

    def __init__(self, source: Optional[WordSource], index_letter: str = DEFAULT_INDEX_LETTER):
        if source is None:
            raise ValueError("No word file supplied.")
        if not isinstance(index_letter, str) or len(index_letter) != 1 \
                or index_letter.upper() not in _ALPHABET:
            raise ValueError(f"index_letter must be a single letter A-Z; got {index_letter!r}")

        self.index_letter: str = index_letter.upper()
        self._by_length: List[Optional[list]] = [None] * (MAX_WORD_LENGTH + 1)

        if isinstance(source, (str, Path)):
            self._load_file(Path(source))
            origin = str(source)
        else:
            self._load_lines(source)
            origin = "<iterable>"
        self._freeze()

        logger.info("Loaded %s words from %s (index letter %s)",
                    self.word_count(), origin, self.index_letter)

    # ---- Loading ----

    def _load_file(self, path: Path) -> None:
        """
        Read one word per line. FileNotFoundError propagates as is; other
        I/O failures are wrapped with the phase they happened in.
        """
        try:
            f = path.open("r", encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise WordListError(f"Error while reading from file: {path}",
                                phase="read", path=str(path)) from e
        try:
            self._load_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise WordListError(f"Error while reading from file: {path}",
                                phase="read", path=str(path)) from e
        finally:
            try:
                f.close()
            except OSError as e:
                raise WordListError(f"Error while closing file: {path}",
                                    phase="close", path=str(path)) from e

    def _load_lines(self, lines: Iterable[str]) -> None:
        for word in clean_words(lines):
            self._add(word)

    def _add(self, word: str) -> None:
        bucket = self._bucket(len(word), word.find(self.index_letter), create=True)
        bucket.add(word)

    def _freeze(self) -> None:
        """Swap every bucket for a frozenset once loading is done."""
        for node in self._by_length:
            if node is None:
                continue
            for slot, bucket in enumerate(node):
                if bucket is not None:
                    node[slot] = frozenset(bucket)

    def _bucket(self, length: int, pos: int, *, create: bool = False):
        """
        Locate the bucket for (length, pos). Without `create`, missing
        levels return None instead of being allocated.
        """
        if length < 1 or length > MAX_WORD_LENGTH:
            return None
        node = self._by_length[length]
        if node is None:
            if not create:
                return None
            # one slot per position plus one for "absent" (-1)
            node = [None] * (length + 1)
            self._by_length[length] = node
        bucket = node[pos + 1]
        if bucket is None:
            if not create:
                return None
            bucket = set()
            node[pos + 1] = bucket
        return bucket

    # ---- Queries ----

    def candidates(self, pattern: str) -> FrozenSet[str]:
        """
        Words of len(pattern) whose first index letter sits where it does in
        `pattern` (e.g. "-----E"), or that lack it when the pattern does.
        An empty set when nothing was loaded there.
        """
        pattern = pattern.upper()
        key = (len(pattern), pattern.find(self.index_letter))
        bucket = self._bucket(*key)
        if bucket is None:
            return _EMPTY
        logger.debug("Bucket %s holds %s words", key, len(bucket))
        return bucket

    def contains(self, word: str) -> bool:
        """Exact, case-insensitive membership test through the buckets."""
        w = word.strip().upper()
        bucket = self._bucket(len(w), w.find(self.index_letter))
        return bucket is not None and w in bucket

    def word_count(self) -> int:
        """Total number of words across all buckets."""
        return sum(size for size in self.bucket_sizes().values())

    def bucket_sizes(self) -> Dict[Tuple[int, int], int]:
        """
        {(length, position): size} for every non-empty bucket.
        """
        sizes: Dict[Tuple[int, int], int] = {}
        for length, node in enumerate(self._by_length):
            if node is None:
                continue
            for slot, bucket in enumerate(node):
                if bucket:
                    sizes[(length, slot - 1)] = len(bucket)
        return sizes

    def words(self) -> Iterator[str]:
        """Iterate over every stored word (bucket order, not input order)."""
        for node in self._by_length:
            if node is None:
                continue
            for bucket in node:
                if bucket:
                    yield from bucket

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.word_count()
