"""Fractional (greedy) and 0/1 (dynamic programming) knapsack solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Item:
    """An item with a positive weight and a profit."""

    weight: int
    profit: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Profit earned per unit of weight."""
        return self.profit / self.weight


@dataclass(frozen=True)
class KnapsackResult:
    """Best total profit and the 1-based indices of the chosen items.

    Indices are listed from the last item towards the first.
    """

    max_profit: int
    selected: tuple[int, ...]


def fractional_knapsack(items: Iterable[Item], capacity: int) -> float:
    """Return the best profit when items may be split, taking best ratios first."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    total = 0.0
    used = 0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if used + item.weight <= capacity:
            used += item.weight
            total += item.profit
        else:
            total += item.profit * ((capacity - used) / item.weight)
            break
    return total


def zero_one_knapsack(
    capacity: int, weights: Iterable[int], profits: Iterable[int]
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem and report which items were taken."""
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("item weights must be positive")

    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        table.append(
            [
                max(profit + previous[room - weight], previous[room])
                if weight <= room
                else previous[room]
                for room in range(capacity + 1)
            ]
        )

    best = table[-1][capacity]
    remaining = best
    room = capacity
    selected: list[int] = []
    for index in range(len(weights), 0, -1):
        if remaining <= 0:
            break
        if remaining != table[index - 1][room]:
            selected.append(index)
            remaining -= profits[index - 1]
            room -= weights[index - 1]

    return KnapsackResult(max_profit=best, selected=tuple(selected))