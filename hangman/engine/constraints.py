"""
Candidate filtering for Hangman.

Two styles live here:

  - Incremental: predicates that only encode what the LATEST guess taught us
    (`by_absence`, `by_positions`, `occurs_once`). Applied to a candidate set
    that already honours every earlier guess, they are enough to keep it
    consistent with the whole game.

  - Full rescan: `matches_pattern` checks one word against the complete
    revealed pattern and tried-letter set in a single pass. The baseline
    strategy uses it on the whole dictionary every turn.

`filter_words` applies any predicate and returns a new set; inputs are never
mutated.
"""

from typing import AbstractSet, Callable, Iterable, Set

from .game import MYSTERY_LETTER

# A predicate decides whether one word can still be the answer.
Predicate = Callable[[str], bool]


def filter_words(words: Iterable[str], predicate: Predicate) -> Set[str]:
    """
    Keep only words for which `predicate(word)` is true.

    Returns:
      a new set (the input collection is left untouched)
    """
    return {w for w in words if predicate(w)}


def by_absence(letter: str) -> Predicate:
    """Word must not contain `letter` anywhere."""
    def _pred(word: str) -> bool:
        return letter not in word
    return _pred


def occurs_once(letter: str) -> Predicate:
    """Word must contain `letter` exactly once."""
    def _pred(word: str) -> bool:
        return word.count(letter) == 1
    return _pred


def by_positions(pattern: str, letter: str) -> Predicate:
    """
    Single-letter positional check against a revealed pattern.

    For every position:
      - pattern shows `letter`   -> word must have `letter` there
      - pattern shows MYSTERY    -> word must NOT have `letter` there
      - pattern shows another letter -> ignored (enforced by earlier turns)
    """
    # (index, present) pairs
    checks = []
    for i, ch in enumerate(pattern):
        if ch == MYSTERY_LETTER:
            checks.append((i, False))
        elif ch == letter:
            checks.append((i, True))

    def _pred(word: str) -> bool:
        for i, present in checks:
            if (word[i] == letter) != present:
                return False
        return True
    return _pred


def matches_pattern(word: str, pattern: str, tried: AbstractSet[str]) -> bool:
    """
    Full consistency check of `word` against `pattern`:
      - same length
      - every revealed position holds the same letter
      - no unrevealed position holds a letter that was already tried
        (a tried letter present in the secret would have been revealed there)
    """
    if len(word) != len(pattern):
        return False
    for w, p in zip(word, pattern):
        if p == MYSTERY_LETTER:
            if w in tried:
                return False
        elif w != p:
            return False
    return True
