"""
Game-parameter validation and console input parsing.

Two layers live here:
  - validate_rules: strict checks run by the Solver at construction time.
    Raises InvalidArgumentError / OutOfRangeError.
  - parse_*: lenient helpers for the interactive shell. They return None for
    unusable input so the caller can simply ask again.
"""

from typing import Optional, Sequence, Union

from .errors import InvalidArgumentError, OutOfRangeError

Colors = Union[str, Sequence[str]]


def validate_rules(colors: Optional[Colors], code_pegs: int) -> str:
    """
    Check the construction parameters and return the color alphabet as a string.

    Order of checks:
      1) colors present, non-empty and not all whitespace
      2) every symbol is a single character
      3) no repeated symbol
      4) code_pegs is an integer >= 1
    """
    if colors is None:
        raise InvalidArgumentError("You must supply code peg colors.")

    symbols = list(colors)
    if not symbols or all(isinstance(s, str) and s.isspace() for s in symbols):
        raise InvalidArgumentError("You must supply code peg colors.")

    for s in symbols:
        if not isinstance(s, str) or len(s) != 1:
            raise InvalidArgumentError(f"Code peg colors must be single characters; got {s!r}.")

    if len(set(symbols)) != len(symbols):
        raise InvalidArgumentError("Code peg colors are not unique.")

    if isinstance(code_pegs, bool) or not isinstance(code_pegs, int):
        raise InvalidArgumentError(f"Number of code pegs must be an integer; got {code_pegs!r}.")
    if code_pegs < 1:
        raise OutOfRangeError(
            f"Number of code pegs must be greater than or equal to 1; got {code_pegs}.")

    return "".join(symbols)


def parse_colors(text: str) -> Optional[str]:
    """Upper-case the entry and drop whitespace; None if nothing is left."""
    colors = "".join(text.split()).upper()
    return colors or None


def parse_count(text: str, *, minimum: int = 0) -> Optional[int]:
    """
    Parse a whole number >= `minimum`.

    Examples:
      parse_count("3")            -> 3
      parse_count("-1")           -> None
      parse_count("0", minimum=1) -> None
    """
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value >= minimum else None


def parse_yes_no(text: str) -> Optional[bool]:
    """Y/YES -> True, N/NO -> False, anything else -> None."""
    answer = text.strip().upper()
    if answer in ("Y", "YES"):
        return True
    if answer in ("N", "NO"):
        return False
    return None
