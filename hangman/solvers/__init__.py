from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register, Dictionary

from . import incremental  # noqa: F401
from . import baseline  # noqa: F401
from .incremental import IncrementalStrategy, FIRST_GUESS
from .baseline import BaselineStrategy
from .letter_freq import most_likely_letter


def create_solver(solver_id: str, dictionary: Dictionary) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id over `dictionary`
    (a WordIndex to share, or a word file path).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(dictionary)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
