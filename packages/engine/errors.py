"""
Exceptions raised by the deduction engine.

Two kinds of failure exist:
  - bad construction input (InvalidArgumentError / OutOfRangeError)
  - misuse of a finished session (InvalidOperationError)

Contradictory feedback is NOT an error: it simply leaves the solver with no
candidates (Solver.is_solvable becomes False).
"""


class SolverError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(SolverError, ValueError):
    """Malformed construction input (colors or peg count)."""


class OutOfRangeError(InvalidArgumentError):
    """Peg count below 1."""


class InvalidOperationError(SolverError, RuntimeError):
    """Feedback given after the session reached a terminal state."""
