# apps/cli/run.py
"""
CLI entry point for running hangman strategy experiments.

This script:
  1) Validates the dictionary (prints counts + SHA, flags invalid lines).
  2) Builds one WordIndex and instantiates the requested solver over it.
  3) Plays the chosen cases with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, summary, git commit, etc.

Cases:
  --samples        the fifteen benchmark words (5 wrong guesses each)
  --words FILE     every word in FILE
  --all (default)  every word in the dictionary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from hangman.datasets import WordIndex, clean_words, validate_wordlist, pretty_summary
from hangman.harness import (
    run_case, to_stat_block, format_results, summarize, pretty_stats,
    SAMPLE_WORDS, DEFAULT_MAX_WRONG_GUESSES,
)
from hangman.harness.core import SAMPLE_MAX_WRONG_GUESSES
from hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from hangman.solvers import create_solver, get_solver_ids, FIRST_GUESS

log = logging.getLogger("apps.cli.run")


def choose_cases(args, index: WordIndex) -> List[str]:
    """
    Resolve --samples / --words / --all into a list of secret words, then
    apply a deterministic --sample by seed.
    """
    if args.samples:
        cases = list(SAMPLE_WORDS)
    elif args.words:
        try:
            with open(args.words, encoding="utf-8") as f:
                cases = list(clean_words(f))
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not load --words file {args.words}: {e}") from e
    else:
        cases = sorted(index.words())

    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        pool = list(cases)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    return cases


def play_cases(solver, cases: List[str], *, max_wrong: int, progress: str, desc: str) -> List[dict]:
    """
    Play every case with `solver`, showing progress on stderr.
    """
    mode = progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    total = len(cases)
    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc=desc, unit="game") if mode == "bar" else cases

    for idx, word in enumerate(iterator, 1):
        r = run_case(solver, word, max_wrong_guesses=max_wrong)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{desc}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--dictionary", default="words.txt",
                    help="path to the dictionary (one word per line)")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--samples", action="store_true",
                       help=f"play the {len(SAMPLE_WORDS)} benchmark words")
    group.add_argument("--words", help="play every word listed in this file")
    group.add_argument("--all", action="store_true",
                       help="play every dictionary word (default)")
    ap.add_argument("--max-wrong", type=int,
                    help=f"wrong guesses allowed per game (default {DEFAULT_MAX_WRONG_GUESSES}, "
                         f"{SAMPLE_MAX_WRONG_GUESSES} with --samples)")
    ap.add_argument("--sample", type=int,
                    help="play only a random subset of the cases (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--index-letter", default=FIRST_GUESS,
                    help="letter used to bucket the dictionary")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def load_index(args) -> tuple:
    """
    Validate then load the dictionary; exits with a message on failure.
    """
    rep = validate_wordlist(args.dictionary)
    print(pretty_summary(rep))
    if not rep["passed"]:
        raise SystemExit("Dictionary validation failed: " + "; ".join(rep["issues"]))
    try:
        index = WordIndex(args.dictionary, args.index_letter)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not load dictionary: {e}") from e
    return index, rep


def main():
    """
    Parse CLI args, validate the dictionary, play the cases with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="hangman - run strategy experiments")
    ap.add_argument("--solver", default="incremental",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    add_common_args(ap)
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    # 1) Validate and load the dictionary once
    index, rep = load_index(args)
    largest = max(index.bucket_sizes().items(), key=lambda kv: kv[1], default=None)
    if largest is not None:
        log.info("Largest bucket (length, position)=%s holds %s words", *largest)

    # 2) Instantiate solver by id over the shared index
    try:
        solver = create_solver(args.solver, index)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    # 3) Choose cases
    cases = choose_cases(args, index)
    max_wrong = args.max_wrong
    if max_wrong is None:
        max_wrong = SAMPLE_MAX_WRONG_GUESSES if args.samples else DEFAULT_MAX_WRONG_GUESSES

    # 4) Play
    results = play_cases(solver, cases, max_wrong=max_wrong,
                         progress=args.progress, desc=solver.id)
    summary = summarize(results)
    if args.samples:
        print(format_results(to_stat_block(results)))
    print(pretty_stats(summary))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
