"""Command line front end for the array, search, knapsack and LCS routines."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from daalab.arrays import duplicate_stats, prefix_sums, second_extremes
from daalab.knapsack import Item, fractional_knapsack, zero_one_knapsack
from daalab.lcs import longest_common_subsequence
from daalab.searching import binary_search, ternary_search
from daalab.sorting import insertion_sort

_SEARCHES = {"binary": binary_search, "ternary": ternary_search}


def _extremes(args: argparse.Namespace) -> int:
    try:
        smallest, largest = second_extremes(args.values)
    except ValueError:
        print("Array must contain at least two elements.")
        return 1
    print(f"Second smallest: {smallest}")
    print(f"Second largest: {largest}")
    return 0


def _prefix(args: argparse.Namespace) -> int:
    print("Output Array: " + " ".join(str(v) for v in prefix_sums(args.values)))
    return 0


def _duplicates(args: argparse.Namespace) -> int:
    stats = duplicate_stats(args.values)
    print(f"Total number of duplicate elements: {stats.duplicate_count}")
    print(
        f"Most repeating element: {stats.most_repeated} "
        f"(repeated {stats.max_frequency} times)"
    )
    return 0


def _search(args: argparse.Namespace) -> int:
    ordered = insertion_sort(args.values)
    print("Array sorted!")
    index = _SEARCHES[args.method](ordered, args.key)
    if index is None:
        print("Element does not exist")
    else:
        print(f"Found {args.key} at index : {index}")
    return 0


def _fractional(args: argparse.Namespace) -> int:
    items = [Item(weight=weight, profit=profit) for profit, weight in args.item]
    print(f"Maximum profit in Knapsack = {fractional_knapsack(items, args.capacity):.2f}")
    return 0


def _knapsack(args: argparse.Namespace) -> int:
    result = zero_one_knapsack(args.capacity, args.weights, args.profits)
    print(f"Maximum Profit: {result.max_profit}")
    print(
        "Selected items (1-based index): "
        + " ".join(str(i) for i in result.selected)
    )
    return 0


def _lcs(args: argparse.Namespace) -> int:
    result = longest_common_subsequence(args.first, args.second)
    print(f"The sequence is : {result.sequence}")
    print(f"Length of LCS = {result.length}")
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daalab", description="Algorithm exercises.")
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("extremes", help="second smallest and second largest")
    cmd.add_argument("values", type=int, nargs="*")
    cmd.set_defaults(handler=_extremes)

    cmd = commands.add_parser("prefix", help="running totals")
    cmd.add_argument("values", type=int, nargs="+")
    cmd.set_defaults(handler=_prefix)

    cmd = commands.add_parser("duplicates", help="count repeated values")
    cmd.add_argument("values", type=int, nargs="+")
    cmd.set_defaults(handler=_duplicates)

    cmd = commands.add_parser("search", help="sort the values and look up a key")
    cmd.add_argument("--method", choices=sorted(_SEARCHES), default="binary")
    cmd.add_argument("key", type=int)
    cmd.add_argument("values", type=int, nargs="*")
    cmd.set_defaults(handler=_search)

    cmd = commands.add_parser("fractional", help="fractional knapsack")
    cmd.add_argument("--capacity", type=int, required=True)
    cmd.add_argument(
        "--item", type=int, nargs=2, action="append", required=True,
        metavar=("PROFIT", "WEIGHT"),
    )
    cmd.set_defaults(handler=_fractional)

    cmd = commands.add_parser("knapsack", help="0/1 knapsack")
    cmd.add_argument("--capacity", type=int, required=True)
    cmd.add_argument("--weights", type=int, nargs="+", required=True)
    cmd.add_argument("--profits", type=int, nargs="+", required=True)
    cmd.set_defaults(handler=_knapsack)

    cmd = commands.add_parser("lcs", help="longest common subsequence")
    cmd.add_argument("first")
    cmd.add_argument("second")
    cmd.set_defaults(handler=_lcs)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the chosen command and return its exit status."""
    args = _parser().parse_args(argv)
    try:
        return args.handler(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())