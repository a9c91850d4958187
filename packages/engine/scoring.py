"""
Mastermind-style scoring (feedback) for a single (candidate, guess) pair.

Conventions:
  - black : correct color in the correct position
  - white : correct color in the wrong position

Each peg (in the code or in the guess) contributes to at most one feedback
peg, so black + white never exceeds the code length.

Algorithm (two counts, order independent):
  1) black = positions where both sequences hold the same symbol.
  2) Walk the guess left to right and consume one matching symbol from a
     multiset of the candidate's symbols per hit. The number of hits is the
     total color overlap; white = overlap - black.
"""

from collections import Counter
from typing import NamedTuple


class Feedback(NamedTuple):
    """(black, white) pegs reported for one guess. Compares equal to a plain tuple."""
    black: int
    white: int


def score(candidate: str, guess: str) -> Feedback:
    """
    Compute the feedback `guess` would receive if `candidate` were the secret.

    Preconditions:
      - len(candidate) == len(guess)

    Examples:
      score("RGBY", "RGBY") -> Feedback(black=4, white=0)
      score("RGBY", "GRYB") -> Feedback(black=0, white=4)
      score("RRGG", "RGRB") -> Feedback(black=1, white=2)
    """
    if len(candidate) != len(guess):
        raise ValueError(
            f"Candidate and guess must be the same length; got {len(candidate)} and {len(guess)}")

    black = sum(1 for c, g in zip(candidate, guess) if c == g)

    # Multiset of the candidate's symbols; one occurrence consumed per hit so
    # a repeated guess symbol cannot match the same code slot twice.
    remaining = Counter(candidate)
    matches = 0
    for g in guess:
        if remaining[g] > 0:
            matches += 1
            remaining[g] -= 1

    return Feedback(black, matches - black)
