"""Command-line front end for the leftist priority queue.

``leftist sort 5 3 8`` prints the numbers in ascending order, and
``leftist merge "1 4 9" "2 3"`` melds one queue per argument and prints the
combined order.
"""

import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from fractions import Fraction
from typing import List, Optional, Sequence, TextIO

from leftist.queue import MinPriorityQueue

LOG_LEVEL_VAR = "LEFTIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_number(text: str) -> Fraction:
    """Parse an integer, decimal or ratio such as ``3/4`` exactly."""
    return Fraction(text)


def drain[P, V](queue: MinPriorityQueue[P, V]) -> List[V]:
    """Remove every element from the queue in priority order."""
    values = []
    while queue.count > 0:
        values.append(queue.remove_minimum())
    return values


def sort_words(words: Sequence[str]) -> List[str]:
    queue: MinPriorityQueue[Fraction, str] = MinPriorityQueue()
    for word in words:
        queue.add(parse_number(word), word)
    return drain(queue)


def merge_runs(runs: Sequence[str]) -> List[str]:
    merged: MinPriorityQueue[Fraction, str] = MinPriorityQueue()
    for run in runs:
        words = run.split()
        merged.meld(MinPriorityQueue.mk((parse_number(w), w) for w in words))
    return drain(merged)


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser with the sort and merge subcommands.
    """
    parser = ArgumentParser(prog="leftist")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    sort_parser = subparsers.add_parser("sort", help="print numbers in order")
    sort_parser.add_argument("numbers", nargs="*")
    merge_parser = subparsers.add_parser(
        "merge", help="merge whitespace-separated runs of numbers"
    )
    merge_parser.add_argument("runs", nargs="*")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level.upper(),
    )


def run(args: Namespace) -> List[str]:
    match args.command:
        case "sort":
            return sort_words(args.numbers)
        case "merge":
            return merge_runs(args.runs)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> None:
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid {LOG_LEVEL_VAR}: {args.log_level}")
    configure_logging(args.log_level)
    try:
        result = run(args)
    except ValueError as e:
        parser.error(str(e))
    for word in result:
        out.write(f"{word}\n")
    logging.debug("wrote %d numbers", len(result))


if __name__ == "__main__":
    main()
