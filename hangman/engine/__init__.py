from .game import HangmanGame, GameStatus, GameOverError, MYSTERY_LETTER, play
from .guesses import GuessLetter, GuessWord
from .constraints import filter_words, by_absence, by_positions, occurs_once, matches_pattern
from .validation import validate_letter, validate_word, validate_pattern

__all__ = [
    "HangmanGame", "GameStatus", "GameOverError", "MYSTERY_LETTER", "play",
    "GuessLetter", "GuessWord",
    "filter_words", "by_absence", "by_positions", "occurs_once", "matches_pattern",
    "validate_letter", "validate_word", "validate_pattern",
]
