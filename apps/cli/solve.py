# apps/cli/solve.py
"""
Interactive assistant for a real code-breaking game.

The player types the game's rules, plays each suggested guess on the real
board, and types back the black/white feedback pegs. The loop ends when a
single code is left (the answer) or when the feedback turns out to be
contradictory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from packages.engine import Solver, SolverError
from packages.engine.validation import parse_colors, parse_count, parse_yes_no

INSTRUCTIONS = [
    "- Enter the possible colors as a sequence of unique characters. e.g. If the possible "
    "colors are Red, Green, Blue and Yellow, enter: RGBY",
    "- Enter the number of pegs in the code.",
    "- Indicate whether duplicate colors are allowed within the code.",
    "- The solver will suggest a guess. Enter the guess into the game, and then enter the "
    "number of black and white \"feedback\" pegs into the solver.",
    "- Keep doing this until you win!",
]

BOLD = "\033[1;37m"
RESET = "\033[0m"


class Console:
    """Prompt/print pair; highlight only when writing to a terminal."""

    def __init__(self, input_fn: Callable[[str], str] = input, color: bool = True):
        self.input_fn = input_fn
        self.color = color

    def say(self, text: str = "", highlight: bool = False) -> None:
        if highlight and self.color:
            text = f"{BOLD}{text}{RESET}"
        print(text)

    def ask(self, prompt: str, parse: Callable[[str], Optional[object]]):
        """Repeat `prompt` until `parse` returns something other than None."""
        while True:
            self.say()
            self.say(prompt)
            value = parse(self.input_fn("> "))
            if value is not None:
                return value


def render_instructions(console: Console) -> None:
    console.say("Welcome to Code Breaker Solver.", highlight=True)
    console.say()
    console.say("How to use:", highlight=True)
    for line in INSTRUCTIONS:
        console.say(line)
    console.say()
    console.say("Press Ctrl + C at any time to quit.")


def build_solver(console: Console, colors: Optional[str] = None, pegs: Optional[int] = None,
                 duplicates: Optional[bool] = None) -> Solver:
    """
    Ask for whatever rule was not given on the command line and construct
    the solver; on a rule error, show it and ask for all prompted values again.
    """
    while True:
        c = colors or console.ask("Enter the possible colors:", parse_colors)
        n = pegs if pegs is not None else console.ask(
            "Enter the number of pegs:", lambda s: parse_count(s, minimum=1))
        d = duplicates if duplicates is not None else console.ask(
            "Are duplicate colors allowed? (Y/N)", parse_yes_no)
        try:
            return Solver(c, n, d)
        except SolverError as e:
            console.say()
            console.say(f"Invalid rules: {e}")
            # Flag values are fixed; don't loop forever on them.
            if colors is not None and pegs is not None and duplicates is not None:
                raise
            colors = pegs = duplicates = None


def solve(solver: Solver, console: Console) -> bool:
    """Run the feedback loop. Returns True if a single code is left."""
    while not solver.is_solved and solver.is_solvable:
        console.say()
        console.say(f"There are {solver.possible_codes} possible codes.")
        console.say(f"Guess: {solver.next_guess}", highlight=True)

        black = console.ask("Enter the number of black feedback pegs:", parse_count)
        white = console.ask("Enter the number of white feedback pegs:", parse_count)
        solver.give_feedback(black, white)

    console.say()
    if solver.is_solvable:
        console.say(f"The code is {solver.next_guess}.", highlight=True)
        return True
    console.say("The code is not solvable. Did you make a mistake entering feedback?")
    return False


def main(argv=None, input_fn: Callable[[str], str] = input) -> int:
    ap = argparse.ArgumentParser(description="codebreaker — interactive solving assistant")
    ap.add_argument("--colors", type=parse_colors, help="distinct color symbols, e.g. RGBY")
    ap.add_argument("--pegs", type=int, help="number of pegs in the code")
    ap.add_argument("--duplicates", action=argparse.BooleanOptionalAction, default=None,
                    help="whether codes may repeat a color (asked if omitted)")
    ap.add_argument("--no-color", action="store_true", help="plain output without highlighting")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    console = Console(input_fn=input_fn, color=not args.no_color and sys.stdout.isatty())
    render_instructions(console)

    try:
        solver = build_solver(console, args.colors, args.pegs, args.duplicates)
        solved = solve(solver, console)
    except SolverError:
        return 2
    except KeyboardInterrupt:
        console.say()
        return 130
    except EOFError:
        console.say()
        return 1
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
