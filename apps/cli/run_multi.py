# apps/cli/run_multi.py
"""
Run multiple solvers in one shot with shared cases, one shared WordIndex and progress.

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
and reports every word where two solvers disagree on wrong guesses or score
(the baseline solver is the reference when it is part of the run).
"""

from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from apps.cli.run import add_common_args, choose_cases, load_index, play_cases
from hangman.harness import summarize, pretty_stats, mismatches, DEFAULT_MAX_WRONG_GUESSES
from hangman.harness.core import SAMPLE_MAX_WRONG_GUESSES
from hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from hangman.solvers import create_solver, get_solver_ids


def _run_one_solver(solver_id: str, index, cases: List[str], *, max_wrong: int, outdir: Path,
                    progress: str, rep: Dict) -> Tuple[List[Dict], str, str]:
    solver = create_solver(solver_id, index)
    results = play_cases(solver, cases, max_wrong=max_wrong, progress=progress, desc=solver_id)
    summary = summarize(results)
    print(pretty_stats(summary))

    # write outputs under <outdir>/<solver_id>/
    run_id = timestamp_id()
    sdir = outdir / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"solver": solver_id, "max_wrong": max_wrong, "num_cases": len(cases)},
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))
    return results, str(csv_path), str(manifest_path)


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="hangman - run many solvers at once")
    ap.add_argument("--solvers", nargs="+", required=True,
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--outdir", default="reports/batch")
    add_common_args(ap)
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    # 1) validate + load once; every solver shares the same index
    index, rep = load_index(args)

    # 2) shared cases (deterministic by seed)
    cases = choose_cases(args, index)
    max_wrong = args.max_wrong
    if max_wrong is None:
        max_wrong = SAMPLE_MAX_WRONG_GUESSES if args.samples else DEFAULT_MAX_WRONG_GUESSES

    # 3) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) run each solver sequentially (shared cases) with progress
    all_results: Dict[str, List[Dict]] = {}
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases (max wrong={max_wrong}) ===")
        results, csv_path, manifest_path = _run_one_solver(
            sid, index, cases, max_wrong=max_wrong, outdir=outdir,
            progress=args.progress, rep=rep,
        )
        all_results[sid] = results
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    # 5) compare every solver against the reference
    reference = "baseline" if "baseline" in all_results else todo[0]
    for sid in todo:
        if sid == reference:
            continue
        diff = mismatches(all_results[sid], all_results[reference])
        print(f"\n{sid} vs {reference}: {len(diff)} word(s) differ"
              + (f" (e.g., {diff[:10]})" if diff else ""))


if __name__ == "__main__":
    main()
