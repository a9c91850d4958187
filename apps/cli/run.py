# apps/cli/run.py
"""
CLI entry point for self-play runs.

This script:
  1) Builds the secret pool for the requested rules (every valid code, or a
     seeded sample of them).
  2) Lets the solver break each secret, with the harness scoring every guess.
  3) Prints a summary and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.engine import SolverError
from packages.harness import run_case, select_secrets, summarize, DEFAULT_MAX_TURNS
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_COLORS = "RGBYOP"
DEFAULT_CODE_PEGS = 4


def _format_summary(summary: dict) -> str:
    """
    One-liner for the console, e.g.
    cases=360 | solved=100.0% | mean=4.12 | median=4.0 | max=7 | hist={1: 1, 2: 9, ...}
    """
    return (
        f"cases={summary['num_cases']} | solved={100.0 * summary['success_rate']:.1f}% "
        f"| mean={summary['mean_guesses']:.2f} | median={summary['median_guesses']:.1f} "
        f"| max={summary['max_guesses']} | hist={summary['histogram']}"
    )


def main(argv=None):
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="codebreaker — run solver self-play")
    ap.add_argument("--colors", default=DEFAULT_COLORS,
                    help="distinct color symbols, e.g. RGBYOP")
    ap.add_argument("--pegs", type=int, default=DEFAULT_CODE_PEGS, help="number of pegs in the code")
    ap.add_argument("--duplicates", action=argparse.BooleanOptionalAction, default=True,
                    help="whether codes may repeat a color")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="guess budget per game (0 = unlimited)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if stderr is a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    max_turns = args.max_turns or None
    rules = {"colors": args.colors, "code_pegs": args.pegs, "allow_duplicates": args.duplicates}

    # 1) Secret pool (also validates the rules)
    try:
        cases = select_secrets(**rules, sample=args.sample, seed=args.seed)
    except SolverError as e:
        raise SystemExit(f"Invalid rules: {e}")

    total = len(cases)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 3) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        results.append(run_case(secret, **rules, max_turns=max_turns))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(_format_summary(summary))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    columns = max_turns or max((r["guesses"] for r in results), default=0)
    write_csv(results, str(csv_path), max_turns=columns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "num_cases": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
