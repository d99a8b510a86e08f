# apps/cli/simulate.py
"""
CLI entry point for batch self-play.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Instantiates the requested solver and plays every (or a sample of the)
     dictionary word(s) as secret, through real GameSessions.
  3) Writes:
       - CSV:  per-game record (score, guesses, emoji feedback)
       - JSON: manifest with config, dictionary report and stats
  4) Prints the aggregated play statistics.
"""

from __future__ import annotations

import argparse
import datetime as dt
import random
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from wordlekit.datasets import DEFAULT_WORDS_PATH, load_words, pretty_summary, validate_dictionary
from wordlekit.engine import ConfigurationError, sanitize
from wordlekit.game import DEFAULT_MAX_ATTEMPTS
from wordlekit.harness import run_batch, write_manifest, write_results_csv
from wordlekit.logs import setup_logging
from wordlekit.solvers import create_solver, get_solver_ids
from wordlekit.stats import compute_stats, pretty_stats


def main(argv: Optional[list] = None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlekit: batch self-play")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH, help="dictionary file")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    ap.add_argument("--sample", type=int, help="play only K secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    # 1) Dictionary check
    rep = validate_dictionary(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Dictionary not found: {args.words}", file=sys.stderr)
        return 2

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    words = load_words(args.words)

    # 2) Deterministic sample of secrets; solvers still search the whole list
    answers = list(dict.fromkeys(sanitize(w) for w in words))
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    progress = None if args.no_progress else (
        lambda it: tqdm(it, ncols=80, desc=solver.id, unit="game"))

    try:
        results = run_batch(solver, cases, words=words, answers=answers,
                            max_attempts=args.max_attempts, seed=args.seed, progress=progress)
    except ConfigurationError as e:
        print(f"Invalid dictionary: {e}", file=sys.stderr)
        return 2

    stats = compute_stats([r["record"] for r in results], max_attempts=args.max_attempts)

    # 3) Outputs
    run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_results_csv(results, str(csv_path))
    write_manifest(
        str(manifest_path),
        stats=stats,
        run_id=run_id,
        config=vars(args),
        dictionary=rep,
        num_cases=len(results),
        solver_id=solver.id,
    )

    # 4) Summary
    print(pretty_stats(stats))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
