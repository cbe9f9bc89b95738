"""
Incremental likelihood strategy.

Strategy:
  - Always open with the index letter ('E', the most common English letter;
    it appears in roughly two thirds of dictionary words).
  - Turn 2: the revealed pattern says where the index letter first occurs (or
    that it is absent), which is exactly the key the WordIndex is bucketed
    by. One lookup yields the starting candidate set.
  - Every later turn: narrow the candidate set using ONLY the outcome of the
    previous guess. Older guesses were already applied, so a single-letter
    check is enough; nothing is rescanned.
  - Guess the letter most candidates contain; guess the word outright once a
    single candidate is left.

States per game:
  FRESH        no guess yet
  AFTER_FIRST  index letter guessed, candidate set not computed
  NARROWING    candidate set computed, refined every turn

Notes:
  - Deterministic: the same word always plays out the same way.
  - One instance plays one game at a time. A new game is detected through
    `game.game_id`; call `reset()` to start over explicitly.
  - Not thread-safe; the WordIndex it reads may be shared freely.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import AbstractSet, FrozenSet, Optional

from hangman.engine.constraints import filter_words, by_absence, by_positions, occurs_once
from hangman.engine.guesses import GuessLetter, GuessWord
from .base import BaseSolver, Dictionary, as_index, register
from .letter_freq import most_likely_letter

logger = logging.getLogger(__name__)

# The opening guess, and the letter the dictionary is bucketed by.
FIRST_GUESS = "E"


class StrategyState(Enum):
    FRESH = "FRESH"
    AFTER_FIRST = "AFTER_FIRST"
    NARROWING = "NARROWING"


@register
class IncrementalStrategy(BaseSolver):
    id = "incremental"
    name = "Incremental Likelihood"
    version = "1.0.0"

    def __init__(self, dictionary: Dictionary):
        super().__init__()
        self.index = as_index(dictionary, FIRST_GUESS)
        self.first_guess = GuessLetter(self.index.index_letter)

        self._game_id: Optional[object] = None
        self.state = StrategyState.FRESH
        self._candidates: Optional[AbstractSet[str]] = None
        self._last_guess: str = self.index.index_letter

    @property
    def candidates(self) -> Optional[FrozenSet[str]]:
        """Words still possible in the current game; None until computed."""
        return None if self._candidates is None else frozenset(self._candidates)

    @property
    def candidate_count(self) -> Optional[int]:
        """Size of the current candidate set; None until it is computed."""
        return None if self._candidates is None else len(self._candidates)

    def reset(self) -> None:
        self._start_game(None)

    def _start_game(self, game_id) -> None:
        self._game_id = game_id
        self.state = StrategyState.FRESH
        self._candidates = None
        self._last_guess = self.index.index_letter

    def next_guess(self, game):
        """
        Decide the next guess for `game`.

        Returns:
            GuessLetter, or GuessWord once one candidate remains.
        """
        if self._game_id != game.game_id:
            self._start_game(game.game_id)

        if self.state == StrategyState.FRESH:
            self.state = StrategyState.AFTER_FIRST
            return self.first_guess

        so_far = game.guessed_so_far()
        if self.state == StrategyState.AFTER_FIRST:
            self._candidates = self._first_candidates(so_far)
            self.state = StrategyState.NARROWING
        elif self._last_guess not in so_far:
            # A miss says the same thing about every position.
            self._candidates = filter_words(self._candidates, by_absence(self._last_guess))
        else:
            self._candidates = filter_words(self._candidates, by_positions(so_far, self._last_guess))

        # A secret missing from the dictionary can make a word guess fail.
        missed = game.incorrectly_guessed_words()
        if missed:
            self._candidates = self._candidates - missed

        logger.debug("game %s: %s candidates for %s", game.game_id, len(self._candidates), so_far)

        # If there's only one choice left, just guess it
        if len(self._candidates) == 1:
            return GuessWord(next(iter(self._candidates)))

        self._last_guess = most_likely_letter(self._candidates, game.all_guessed_letters())
        return GuessLetter(self._last_guess)

    def _first_candidates(self, so_far: str) -> AbstractSet[str]:
        """
        Bucket lookup, corrected for what the bucket key cannot express.

        The bucket only pins the FIRST index letter. If the pattern shows it
        exactly once, words repeating it later are ruled out; otherwise every
        position is rechecked for the index letter.
        """
        letter = self.index.index_letter
        bucket = self.index.candidates(so_far)
        if so_far.count(letter) == 1:
            return filter_words(bucket, occurs_once(letter))
        return filter_words(bucket, by_positions(so_far, letter))
