"""Command line front end for a few of the exercises."""

from __future__ import annotations

import argparse
import sys

from warmups.arithmetic import years_until_heavier
from warmups.sequences import problems_solved
from warmups.strings import game_winner

_DEMO_WEIGHTS = ((4, 7), (4, 9), (1, 1))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="warmups", description="Run a warm-up exercise.")
    commands = parser.add_subparsers(dest="command", required=True)

    bear = commands.add_parser("bear", help="years until Limak outweighs Bob")
    bear.add_argument("weights", nargs="*", type=int, metavar="WEIGHT")

    commands.add_parser("team", help="read n and n votes from standard input")
    commands.add_parser("anton", help="read n and the outcomes from standard input")
    return parser


def _run_bear(weights: list[int]) -> list[str]:
    if not weights:
        return [str(years_until_heavier(a, b)) for a, b in _DEMO_WEIGHTS]
    if len(weights) != 2:
        raise ValueError("bear takes exactly two weights")
    return [str(years_until_heavier(weights[0], weights[1]))]


def _run_team(tokens: list[str]) -> list[str]:
    if not tokens:
        raise ValueError("missing number of problems")
    count = int(tokens[0])
    numbers = [int(t) for t in tokens[1 : 1 + 3 * count]]
    if len(numbers) != 3 * count:
        raise ValueError("not enough votes")
    votes = [tuple(numbers[i : i + 3]) for i in range(0, len(numbers), 3)]
    return [str(problems_solved(votes))]


def _run_anton(tokens: list[str]) -> list[str]:
    if len(tokens) < 2:
        raise ValueError("expected the number of games and the outcomes")
    return [game_winner(tokens[1])]


def main(argv: list[str] | None = None) -> int:
    """Run the chosen exercise and print its answer; return an exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "bear":
            lines = _run_bear(args.weights)
        elif args.command == "team":
            lines = _run_team(sys.stdin.read().split())
        else:
            lines = _run_anton(sys.stdin.read().split())
    except ValueError as exc:
        print(f"warmups: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())