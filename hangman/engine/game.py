"""
Hangman game state.

A game holds one secret word and tracks:
  - the revealed pattern ('-' for every letter not yet uncovered)
  - correct / incorrect letters and incorrect whole-word guesses
  - status (keep guessing, won, lost) and the running score

Scoring:
  - while playing or after a win: one point per wrong guess (letter or word)
    plus one point per correctly guessed letter
  - after a loss: a flat LOST_SCORE

The game is lost once the number of wrong guesses EXCEEDS max_wrong_guesses,
so a budget of 5 allows five misses and fails on the sixth.
"""

from __future__ import annotations

import itertools
from enum import Enum
from typing import List, Set

from .validation import validate_letter, validate_word

# Placeholder for letters that have not been revealed yet.
MYSTERY_LETTER = "-"

# Score assigned to any lost game.
LOST_SCORE = 25

_game_ids = itertools.count(1)


class GameStatus(Enum):
    KEEP_GUESSING = "KEEP_GUESSING"
    GAME_WON = "GAME_WON"
    GAME_LOST = "GAME_LOST"


class GameOverError(RuntimeError):
    """Raised when a guess is made on a game that has already finished."""


class HangmanGame:

    def __init__(self, secret_word: str, max_wrong_guesses: int):
        secret = secret_word.strip().upper() if isinstance(secret_word, str) else secret_word
        if not validate_word(secret):
            raise ValueError(f"Secret word must be non-empty A-Z letters; got {secret_word!r}")
        if max_wrong_guesses < 0:
            raise ValueError(f"max_wrong_guesses must be >= 0; got {max_wrong_guesses}")

        self.secret_word: str = secret
        self.max_wrong_guesses: int = int(max_wrong_guesses)
        self.game_id: int = next(_game_ids)

        self._revealed: List[str] = [MYSTERY_LETTER] * len(secret)
        self._correct_letters: Set[str] = set()
        self._incorrect_letters: Set[str] = set()
        self._incorrect_words: Set[str] = set()

    @property
    def secret_word_length(self) -> int:
        return len(self.secret_word)

    # ---- Commands ----

    def guess_letter(self, letter: str) -> str:
        """
        Reveal every occurrence of `letter`; returns the new pattern.
        """
        self._assert_can_keep_guessing()
        if not validate_letter(letter):
            raise ValueError(f"Guess must be a single letter A-Z; got {letter!r}")
        ch = letter.upper()

        good_guess = False
        for i, s in enumerate(self.secret_word):
            if s == ch:
                self._revealed[i] = ch
                good_guess = True

        if good_guess:
            self._correct_letters.add(ch)
        else:
            self._incorrect_letters.add(ch)
        return self.guessed_so_far()

    def guess_word(self, word: str) -> str:
        """
        Guess the whole word. A hit reveals everything; a miss counts as a
        wrong guess. Returns the new pattern.
        """
        self._assert_can_keep_guessing()
        if not validate_word(word):
            raise ValueError(f"Guess must be A-Z letters; got {word!r}")
        guess = word.upper()

        if guess == self.secret_word:
            self._revealed = list(self.secret_word)
        else:
            self._incorrect_words.add(guess)
        return self.guessed_so_far()

    # ---- Queries ----

    def guessed_so_far(self) -> str:
        return "".join(self._revealed)

    def correctly_guessed_letters(self) -> Set[str]:
        return set(self._correct_letters)

    def incorrectly_guessed_letters(self) -> Set[str]:
        return set(self._incorrect_letters)

    def incorrectly_guessed_words(self) -> Set[str]:
        return set(self._incorrect_words)

    def all_guessed_letters(self) -> Set[str]:
        return self._correct_letters | self._incorrect_letters

    def num_wrong_guesses_made(self) -> int:
        return len(self._incorrect_letters) + len(self._incorrect_words)

    def game_status(self) -> GameStatus:
        if self.guessed_so_far() == self.secret_word:
            return GameStatus.GAME_WON
        if self.num_wrong_guesses_made() > self.max_wrong_guesses:
            return GameStatus.GAME_LOST
        return GameStatus.KEEP_GUESSING

    def current_score(self) -> int:
        if self.game_status() == GameStatus.GAME_LOST:
            return LOST_SCORE
        return self.num_wrong_guesses_made() + len(self._correct_letters)

    def _assert_can_keep_guessing(self) -> None:
        status = self.game_status()
        if status != GameStatus.KEEP_GUESSING:
            raise GameOverError(f"Cannot keep guessing in current game state: {status.value}")

    def __str__(self) -> str:
        return (f"{self.guessed_so_far()}; score={self.current_score()}; "
                f"status={self.game_status().value}")


def play(game: HangmanGame, strategy) -> int:
    """
    Let `strategy` guess until the game is over; return the final score.
    """
    while game.game_status() == GameStatus.KEEP_GUESSING:
        strategy.next_guess(game).make_guess(game)
    return game.current_score()
