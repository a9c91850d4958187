from .scoring import Feedback, score
from .constraints import filter_candidates, is_possible_code
from .codes import generate_codes, count_codes, is_valid_code
from .validation import validate_rules
from .errors import SolverError, InvalidArgumentError, OutOfRangeError, InvalidOperationError
from .solver import Solver, ACTIVE, SOLVED, UNSOLVABLE

__all__ = [
    "Feedback", "score", "filter_candidates", "is_possible_code",
    "generate_codes", "count_codes", "is_valid_code", "validate_rules",
    "SolverError", "InvalidArgumentError", "OutOfRangeError", "InvalidOperationError",
    "Solver", "ACTIVE", "SOLVED", "UNSOLVABLE",
]
