"""
Batch statistics over run_case results.

A game "fails" when it needed more than FAIL_WRONG_GUESSES misses (it would
have been lost under the usual 5-miss rule); a "poor performer" needed more
than POOR_WRONG_GUESSES.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

FAIL_WRONG_GUESSES = 5
POOR_WRONG_GUESSES = 15


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate per-game results into one JSON-serializable dict.
    """
    if not results:
        return {"games": 0}

    scores = np.array([r["score"] for r in results], dtype=float)
    wrong = np.array([r["wrong_guesses"] for r in results], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    return {
        "games": len(results),
        "total_score": int(scores.sum()),
        "avg_score": float(scores.mean()),
        "worst_score": int(scores.max()),
        "p50_score": float(np.percentile(scores, 50)),
        "p90_score": float(np.percentile(scores, 90)),
        "avg_wrong_guesses": float(wrong.mean()),
        "worst_wrong_guesses": int(wrong.max()),
        "fail_rate": float((wrong > FAIL_WRONG_GUESSES).mean()),
        "wins": int(sum(1 for r in results if r["success"])),
        "avg_time_ms": float(times.mean()),
        "poor_performers": [r["word"] for r in results if r["wrong_guesses"] > POOR_WRONG_GUESSES],
    }


def pretty_stats(summary: Dict) -> str:
    """One-screen text rendering of `summarize` output."""
    if not summary.get("games"):
        return "no games played"
    poor = summary["poor_performers"]
    return "\n".join([
        f"Games: {summary['games']} (won {summary['wins']})",
        f"Average score: {summary['avg_score']:.3f} (p50={summary['p50_score']:.1f}, "
        f"p90={summary['p90_score']:.1f}, worst={summary['worst_score']})",
        f"Average number of wrong guesses: {summary['avg_wrong_guesses']:.3f} "
        f"(worst={summary['worst_wrong_guesses']})",
        f"Percentage of words that fail: {summary['fail_rate'] * 100:.2f}%",
        f"Average time per word: {summary['avg_time_ms']:.3f}ms",
        f"Worst performers ({len(poor)} total): {poor[:20]}",
    ])


def mismatches(left: List[Dict], right: List[Dict]) -> List[str]:
    """
    Words whose wrong-guess count or score differ between two runs over the
    same cases (matched by word).
    """
    by_word = {r["word"]: r for r in right}
    out: List[str] = []
    for r in left:
        other = by_word.get(r["word"])
        if other is None:
            continue
        if (r["wrong_guesses"], r["score"]) != (other["wrong_guesses"], other["score"]):
            out.append(r["word"])
    return out
