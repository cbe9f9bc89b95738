from __future__ import annotations
from pathlib import Path
from typing import Dict, Type, Union

from hangman.datasets.word_index import WordIndex, DEFAULT_INDEX_LETTER

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

# What a solver accepts as its dictionary: a built index or a word file.
Dictionary = Union[WordIndex, str, Path]


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


def as_index(dictionary: Dictionary, index_letter: str = DEFAULT_INDEX_LETTER) -> WordIndex:
    """
    Reuse a WordIndex as is; build one from anything else.
    """
    if isinstance(dictionary, WordIndex):
        return dictionary
    return WordIndex(dictionary, index_letter)


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def reset(self) -> None:
        """
        Forget any per-game state. Stateless solvers have nothing to do.
        """

    def next_guess(self, game):
        """
        Return a GuessLetter or GuessWord for the current state of `game`.
        """
        raise NotImplementedError("Override in subclass")
