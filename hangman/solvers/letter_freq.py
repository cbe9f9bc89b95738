"""
Letter-frequency scorer (distinct-word coverage).

Idea:
  - For each letter A-Z not yet tried, count how many CANDIDATE words contain
    it at least once (a word with the letter twice still counts once).
  - Guess the letter with the highest count: it is the letter most likely to
    appear in the secret word, given the candidates are equally likely.

Tie-break:
  - Letters are scanned A->Z and the running best is replaced whenever a
    count is >= the best so far, so the LAST letter reaching the maximum
    wins.

Degenerate input:
  - With no candidates every count is 0, and the result is the
    alphabetically last untried letter ('Z' when nothing was tried).
"""

from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Iterable

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def letter_counts(candidates: Iterable[str], excluded: AbstractSet[str] = frozenset()) -> dict:
    """
    {letter: number of candidate words containing it}, for untried letters only.
    """
    skip = {ch.upper() for ch in excluded}
    counts = Counter(ch for w in candidates for ch in set(w) if ch not in skip)
    return {ch: counts[ch] for ch in ALPHABET if ch not in skip}


def most_likely_letter(candidates: Iterable[str], excluded: AbstractSet[str] = frozenset()) -> str:
    """
    Return the untried letter occurring in the most candidate words; ties go to
    the later letter in the alphabet.

    Raises ValueError only if every letter is excluded.
    """
    counts = letter_counts(candidates, excluded)
    if not counts:
        raise ValueError("Every letter has already been tried")

    best = -1
    most_likely = ""
    for ch in ALPHABET:
        if ch not in counts:
            continue
        if counts[ch] >= best:
            best = counts[ch]
            most_likely = ch
    return most_likely
