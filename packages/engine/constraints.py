"""
Candidate filtering given game history.

Given:
  - a pool of codes (usually the solver's current candidate set)
  - a history of (guess, feedback) pairs

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
"""

from typing import Iterable, List, Tuple
from .scoring import Feedback, score

# History is a sequence of (guess, (black, white)) tuples.
History = Iterable[Tuple[str, Tuple[int, int]]]


def is_possible_code(code: str, guess: str, feedback: Tuple[int, int]) -> bool:
    """
    True if `code`, were it the secret, would have produced `feedback` for `guess`.
    """
    return score(code, guess) == Feedback(*feedback)


def filter_candidates(codes: Iterable[str], history: History) -> List[str]:
    """
    Keep only codes that would produce exactly the recorded feedback for every
    (guess, feedback) in `history`.

    Args:
      codes   : iterable of candidate codes
      history : iterable of (guess, (black, white)) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `codes`).
    """
    history = list(history)
    out: List[str] = []

    for code in codes:
        # A single mismatching round is enough to rule the code out.
        if all(is_possible_code(code, g, fb) for g, fb in history):
            out.append(code)

    return out
