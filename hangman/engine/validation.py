"""
Lightweight shape validation for guesses and patterns.

This module answers the question: "Is this input well-formed?"
  - a letter is a single character A-Z (either case)
  - a word is a non-empty run of A-Z letters (either case)
  - a pattern is a non-empty run of A-Z letters and the '-' placeholder

Nothing here checks dictionary membership; a guessed word does not have to be
a dictionary word to be a legal Hangman guess.
"""

from typing import Any

_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def validate_letter(letter: Any) -> bool:
    """Return True if `letter` is exactly one letter A-Z (case-insensitive)."""
    if not isinstance(letter, str) or len(letter) != 1:
        return False
    return letter.upper() in _ALPHABET


def validate_word(word: Any) -> bool:
    """Return True if `word` is a non-empty string of letters A-Z only."""
    if not isinstance(word, str) or not word:
        return False
    return all(ch in _ALPHABET for ch in word.upper())


def validate_pattern(pattern: Any, mystery: str = "-") -> bool:
    """
    Return True if `pattern` only holds letters A-Z and the `mystery`
    placeholder, e.g. "-A--LE".
    """
    if not isinstance(pattern, str) or not pattern:
        return False
    return all(ch == mystery or ch in _ALPHABET for ch in pattern.upper())
