"""
Deduction engine for one code-breaking session.

The solver holds every code still consistent with the feedback seen so far
and always suggests the first of them. Typical loop:

    solver = Solver("RGBY", 4, allow_duplicates=False)
    while solver.state == ACTIVE:
        guess = solver.next_guess          # play this in the game
        solver.give_feedback(black, white) # pegs the game reported

States:
  - ACTIVE     : more than one candidate left
  - SOLVED     : exactly one candidate (terminal)
  - UNSOLVABLE : no candidate left, feedback was contradictory (terminal)

Not thread-safe: give_feedback reads and replaces the candidate list without
locking.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .codes import generate_codes
from .constraints import filter_candidates
from .errors import InvalidOperationError
from .scoring import Feedback
from .validation import Colors, validate_rules

logger = logging.getLogger(__name__)

ACTIVE = "active"
SOLVED = "solved"
UNSOLVABLE = "unsolvable"


class Solver:
    def __init__(self, colors: Optional[Colors], code_pegs: int, allow_duplicates: bool):
        """
        Args:
          colors           : distinct single-character symbols, e.g. "RGBY"
          code_pegs        : number of pegs in the code (>= 1)
          allow_duplicates : whether a code may repeat a color

        Raises:
          InvalidArgumentError : missing/blank/repeated colors, non-integer code_pegs
          OutOfRangeError      : code_pegs < 1
        """
        self.colors: str = validate_rules(colors, code_pegs)
        self.code_pegs: int = code_pegs
        self.allow_duplicates: bool = bool(allow_duplicates)

        self._codes: List[str] = generate_codes(self.colors, self.code_pegs, self.allow_duplicates)
        self._history: List[Tuple[str, Feedback]] = []

        logger.debug(
            f"Generated {len(self._codes)} codes "
            f"(colors={self.colors}, pegs={self.code_pegs}, duplicates={self.allow_duplicates})")

    # ---- status queries ----

    @property
    def is_solvable(self) -> bool:
        """False once feedback has ruled out every code (likely a mis-entered peg count)."""
        return len(self._codes) > 0

    @property
    def is_solved(self) -> bool:
        return len(self._codes) == 1

    @property
    def possible_codes(self) -> int:
        return len(self._codes)

    @property
    def next_guess(self) -> Optional[str]:
        """First remaining candidate; the answer once solved, None once unsolvable."""
        return self._codes[0] if self._codes else None

    @property
    def state(self) -> str:
        if not self._codes:
            return UNSOLVABLE
        if len(self._codes) == 1:
            return SOLVED
        return ACTIVE

    @property
    def candidates(self) -> Tuple[str, ...]:
        return tuple(self._codes)

    @property
    def history(self) -> Tuple[Tuple[str, Feedback], ...]:
        return tuple(self._history)

    # ---- transition ----

    def give_feedback(self, black: int, white: int) -> int:
        """
        Accept the game's feedback for the current next_guess and drop every
        candidate that would not have produced it.

        Returns the number of candidates left.

        Raises:
          InvalidOperationError: the session is already solved or unsolvable.
        """
        if self.is_solved or not self.is_solvable:
            raise InvalidOperationError(
                "The solver has already solved the code, or the code is no longer solvable.")

        guess = self._codes[0]
        feedback = Feedback(black, white)
        before = len(self._codes)

        self._codes = filter_candidates(self._codes, [(guess, feedback)])
        self._history.append((guess, feedback))

        logger.debug(
            f"Round {len(self._history)}: {guess} -> {black}B/{white}W, "
            f"{before} -> {len(self._codes)} candidates")
        if not self._codes:
            logger.debug(f"No code is consistent with the feedback history {self._history}")

        return len(self._codes)

    def __repr__(self) -> str:
        return (f"Solver(colors={self.colors!r}, code_pegs={self.code_pegs}, "
                f"allow_duplicates={self.allow_duplicates}, possible_codes={self.possible_codes})")
