"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-A--LE" as formulas (which would display as #NAME?).
- Games have no fixed length, so the full guess history is packed into two
  space-separated columns instead of one column pair per turn.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-A--LE" -> "'-A--LE"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, word, success, status, score, wrong_guesses, guesses, time_ms,
      guess_history, pattern_history

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "word", "success", "status", "score", "wrong_guesses",
              "guesses", "time_ms", "guess_history", "pattern_history"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "word": r["word"],
                "success": r["success"],
                "status": r["status"],
                "score": r["score"],
                "wrong_guesses": r["wrong_guesses"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "guess_history": " ".join(g for g, _ in hist),
                "pattern_history": _excel_safe_pattern(" ".join(patt for _, patt in hist)),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, dictionary, max_wrong, sample, outdir)
      - dictionary: output of datasets.validate_wordlist(...)
      - summary: output of harness.stats.summarize(...)
      - num_cases: number of games in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
