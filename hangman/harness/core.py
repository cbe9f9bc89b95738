"""
Experiment harness core primitives.

- run_case:           play one secret word to the end with a given strategy.
- run_batch:          play many words in sequence (optionally a sample prefix).
- score_sample_words: the classic fifteen-word benchmark (5 wrong guesses each).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from hangman.engine import HangmanGame, GameStatus

# Default wrong-guess budget for full-dictionary runs.
DEFAULT_MAX_WRONG_GUESSES = 25

# Budget used by the sample-word benchmark.
SAMPLE_MAX_WRONG_GUESSES = 5

# Sample words of the reference benchmark; total score there is 140.
SAMPLE_WORDS = (
    "COMAKER", "CUMULATE", "ERUPTIVE", "FACTUAL", "MONADISM", "MUS", "NAGGING",
    "OSES", "REMEMBERED", "SPODUMENES", "STEREOISOMERS", "TOXICS",
    "TRICHROMATS", "TRIOSE", "UNIFORMED",
)

# Word used for step-by-step checks of a full game.
TEST_WORD = "CATTLE"


def run_case(
        strategy,
        word: str,
        *,
        max_wrong_guesses: int = DEFAULT_MAX_WRONG_GUESSES,
) -> Dict:
    """
    Play one game until the strategy wins or runs out of wrong guesses.

    Args:
        strategy:          an object implementing BaseSolver with next_guess(game)
        word:              the secret word for this case
        max_wrong_guesses: misses allowed before the game is lost

    Returns:
        dict with keys:
            word, success (bool), status, score, wrong_guesses, guesses,
            time_ms (float), history (list[(guess, pattern)]),
            candidate_counts (list[int], empty for strategies without them)
    """
    game = HangmanGame(word, max_wrong_guesses)
    strategy.reset()

    # History accumulates (guess, pattern-after-guess) tuples
    history: List[Tuple[str, str]] = []
    candidate_counts: List[int] = []
    elapsed_ns = 0

    while game.game_status() == GameStatus.KEEP_GUESSING:
        t0 = time.perf_counter_ns()
        guess = strategy.next_guess(game)
        elapsed_ns += time.perf_counter_ns() - t0

        count = getattr(strategy, "candidate_count", None)
        if count is not None:
            candidate_counts.append(count)

        patt = guess.make_guess(game)
        history.append((str(guess), patt))

    status = game.game_status()
    return {
        "word": game.secret_word,
        "success": status == GameStatus.GAME_WON,
        "status": status.value,
        "score": game.current_score(),
        "wrong_guesses": game.num_wrong_guesses_made(),
        "guesses": len(history),
        "time_ms": elapsed_ns / 1_000_000.0,
        "history": history,
        "candidate_counts": candidate_counts,
    }


def run_batch(
        strategy,
        words: Iterable[str],
        *,
        max_wrong_guesses: int = DEFAULT_MAX_WRONG_GUESSES,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    words are played to speed up quick experiments.
    """
    pool = list(words)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(strategy, w, max_wrong_guesses=max_wrong_guesses) for w in pool]


# ---- Sample-word benchmark ----

@dataclass
class StatBlock:
    """Accumulated results of one sample-word run."""
    time_ms: float = 0.0
    results: Dict[str, Tuple[int, int]] = field(default_factory=dict)  # word -> (score, wrong)
    final_score: int = 0


def score_sample_words(strategy, words: Iterable[str] = SAMPLE_WORDS,
                       max_wrong_guesses: int = SAMPLE_MAX_WRONG_GUESSES) -> StatBlock:
    """
    Play every sample word and total the scores.
    """
    t0 = time.perf_counter()
    results = run_batch(strategy, words, max_wrong_guesses=max_wrong_guesses)
    stats = to_stat_block(results)
    stats.time_ms = (time.perf_counter() - t0) * 1000.0
    return stats


def to_stat_block(results: Iterable[Dict]) -> StatBlock:
    """
    Fold run_case results into a StatBlock (time is the sum of guess time).
    """
    stats = StatBlock()
    for r in results:
        stats.results[r["word"]] = (r["score"], r["wrong_guesses"])
        stats.final_score += r["score"]
        stats.time_ms += r["time_ms"]
    return stats


def format_results(stats: StatBlock) -> str:
    """
    Render a StatBlock as the per-word / overall text report.
    """
    lines = [" == Individual Words =="]
    for word, (score, wrong) in stats.results.items():
        lines.append(f"{word} = {score} ({wrong})")
    lines.append(" == Overall Results ==")
    lines.append(f"Final Score: {stats.final_score}")
    lines.append(f"Time to complete: {stats.time_ms:.1f}ms")
    per_word = stats.time_ms / len(stats.results) if stats.results else 0.0
    lines.append(f"Average time per word: {per_word:.3f}ms")
    return "\n".join(lines)
