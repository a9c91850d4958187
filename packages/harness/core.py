"""
Self-play harness core primitives.

- run_case:  play one game against a known secret, with the harness acting
             as an honest code-maker that scores every suggested guess.
- run_batch: run many secrets in sequence (every valid code, or a seeded
             sample of them).
- summarize: aggregate a batch into headline numbers.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Optional

import numpy as np

from packages.engine import Solver, score, is_valid_code, InvalidArgumentError

logger = logging.getLogger(__name__)

# Classic board: ten rows of guesses.
DEFAULT_MAX_TURNS = 10


def run_case(
        secret: str,
        *,
        colors: str,
        code_pegs: int,
        allow_duplicates: bool,
        max_turns: Optional[int] = None,
) -> Dict:
    """
    Execute one game until the solver names the secret, runs out of
    candidates, or uses up `max_turns` guesses (None = unlimited).

    Returns:
        dict with keys:
            secret (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, black, white)]), final_candidates (int)
    """
    solver = Solver(colors, code_pegs, allow_duplicates)
    if not is_valid_code(secret, solver.colors, code_pegs, solver.allow_duplicates):
        raise InvalidArgumentError(f"{secret!r} is not a valid code for these rules")

    history: List[tuple] = []
    success = False

    t0 = time.perf_counter()
    while solver.is_solvable and (max_turns is None or len(history) < max_turns):
        guess = solver.next_guess
        black, white = score(secret, guess)
        history.append((guess, black, white))

        if guess == secret:
            success = True
            break

        solver.give_feedback(black, white)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": secret,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "final_candidates": solver.possible_codes,
    }


def select_secrets(
        *,
        colors: str,
        code_pegs: int,
        allow_duplicates: bool,
        sample: Optional[int] = None,
        seed: Optional[int] = None,
) -> List[str]:
    """
    Every valid code in generation order, or a deterministic (by seed)
    random sample of `sample` of them.
    """
    secrets = list(Solver(colors, code_pegs, allow_duplicates).candidates)
    if sample is not None and sample < len(secrets):
        secrets = random.Random(seed).sample(secrets, sample)
    return secrets


def run_batch(
        *,
        colors: str,
        code_pegs: int,
        allow_duplicates: bool,
        max_turns: Optional[int] = None,
        sample: Optional[int] = None,
        seed: Optional[int] = None,
) -> List[Dict]:
    """
    Run one case per secret chosen by select_secrets.
    """
    secrets = select_secrets(colors=colors, code_pegs=code_pegs,
                             allow_duplicates=allow_duplicates, sample=sample, seed=seed)

    logger.info(f"Running {len(secrets)} cases (colors={colors}, pegs={code_pegs}, "
                f"duplicates={allow_duplicates}, max_turns={max_turns})")

    out = [
        run_case(s, colors=colors, code_pegs=code_pegs, allow_duplicates=allow_duplicates,
                 max_turns=max_turns)
        for s in secrets
    ]

    logger.info(f"Finished {len(out)} cases")
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Headline numbers for a batch.

    Returns:
        dict with num_cases, success_rate, mean_guesses, median_guesses,
        max_guesses and histogram ({guess count: games}, successes only).
    """
    if not results:
        return {"num_cases": 0, "success_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "max_guesses": 0, "histogram": {}}

    guesses = np.array([r["guesses"] for r in results], dtype=int)
    won = np.array([r["success"] for r in results], dtype=bool)
    counts = np.bincount(guesses[won]) if won.any() else np.zeros(0, dtype=int)

    return {
        "num_cases": int(len(results)),
        "success_rate": float(won.mean()),
        "mean_guesses": float(guesses.mean()),
        "median_guesses": float(np.median(guesses)),
        "max_guesses": int(guesses.max()),
        "histogram": {int(k): int(v) for k, v in enumerate(counts) if v},
    }
