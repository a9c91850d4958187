"""
Candidate-space generation.

Every code of length `code_pegs` over `colors`, in lexicographic order of the
alphabet as given (leftmost position varies slowest). The order matters:
the solver always offers the first surviving candidate as its next guess.

  colors="RGB", code_pegs=2, duplicates     -> RR RG RB GR GG GB BR BG BB
  colors="RGB", code_pegs=2, no duplicates  -> RG RB GR GB BR BG
"""

from itertools import permutations, product
from math import perm
from typing import Iterator, List


def iter_codes(colors: str, code_pegs: int, allow_duplicates: bool) -> Iterator[str]:
    """Lazily yield every valid code in generation order."""
    if allow_duplicates:
        combos = product(colors, repeat=code_pegs)
    else:
        # Yields nothing when code_pegs > len(colors).
        combos = permutations(colors, code_pegs)
    for combo in combos:
        yield "".join(combo)


def generate_codes(colors: str, code_pegs: int, allow_duplicates: bool) -> List[str]:
    """Materialize the full candidate set."""
    return list(iter_codes(colors, code_pegs, allow_duplicates))


def count_codes(num_colors: int, code_pegs: int, allow_duplicates: bool) -> int:
    """
    Size of the candidate space without generating it:
    a**n with duplicates, a!/(a-n)! without (0 when n > a).
    """
    if allow_duplicates:
        return num_colors ** code_pegs
    return perm(num_colors, code_pegs)


def is_valid_code(code: str, colors: str, code_pegs: int, allow_duplicates: bool) -> bool:
    """True if `code` belongs to the candidate space of these rules."""
    if len(code) != code_pegs or any(c not in colors for c in code):
        return False
    return allow_duplicates or len(set(code)) == len(code)
