"""
Guess commands produced by strategies.

A strategy never mutates the game directly; it returns one of these and the
caller applies it with `make_guess(game)`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .game import HangmanGame


@dataclass(frozen=True)
class GuessLetter:
    letter: str

    def make_guess(self, game: HangmanGame) -> str:
        return game.guess_letter(self.letter)

    def __str__(self) -> str:
        return self.letter


@dataclass(frozen=True)
class GuessWord:
    word: str

    def make_guess(self, game: HangmanGame) -> str:
        return game.guess_word(self.word)

    def __str__(self) -> str:
        return self.word
