"""
Baseline (full rescan) strategy.

Strategy:
  - Keep the dictionary as one plain frozenset and derive everything from the
    game on every turn: filter ALL words against the full revealed pattern
    and the full set of tried letters, then pick the most likely letter.
  - Guess the word once a single candidate remains.

Notes:
  - No per-game state at all, so one instance may serve any number of games
    (and threads) at once.
  - It does not special-case the opening guess. Whenever its first pick is the
    index letter anyway, it must play exactly like IncrementalStrategy, which
    makes it a correctness oracle for the incremental filtering.
  - Deliberately slow: O(dictionary) per turn.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from hangman.datasets.word_index import WordIndex
from hangman.engine.constraints import filter_words, matches_pattern
from hangman.engine.guesses import GuessLetter, GuessWord
from .base import BaseSolver, as_index, register
from .letter_freq import most_likely_letter


@register
class BaselineStrategy(BaseSolver):
    id = "baseline"
    name = "Baseline (full rescan)"
    version = "1.0.0"

    def __init__(self, dictionary: Union[WordIndex, str, Path, Iterable[str]]):
        super().__init__()
        self.dictionary = frozenset(as_index(dictionary).words())

    def next_guess(self, game):
        so_far = game.guessed_so_far()
        tried = game.all_guessed_letters()

        candidates = filter_words(self.dictionary, lambda w: matches_pattern(w, so_far, tried))
        candidates -= game.incorrectly_guessed_words()

        if len(candidates) == 1:
            return GuessWord(next(iter(candidates)))
        return GuessLetter(most_likely_letter(candidates, tried))
