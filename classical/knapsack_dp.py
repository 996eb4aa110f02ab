import logging
import operator
import os
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

UINT32_MAX = 2**32 - 1
INT64_MAX = int(np.iinfo(np.int64).max)
DEFAULT_MAX_CELLS = 500_000_000


class Item(NamedTuple):
    weight: int
    value: int


class KnapsackInputError(ValueError):
    """Raised when items or capacity fall outside the non-negative 32-bit domain."""


class TableTooLargeError(KnapsackInputError):
    """Raised when the DP table would exceed KNAPSACK_MAX_CELLS cells."""


def _as_uint32(x, what: str) -> int:
    if isinstance(x, (float, np.floating)):
        raise KnapsackInputError(f"{what} must be an integer, got {x!r}")
    try:
        x = operator.index(x)
    except TypeError:
        raise KnapsackInputError(f"{what} must be an integer, got {x!r}") from None
    if x < 0:
        raise KnapsackInputError(f"{what} must be >= 0, got {x}")
    if x > UINT32_MAX:
        raise KnapsackInputError(f"{what} must fit in 32 bits, got {x}")
    return x


def coerce_items(items) -> List[Item]:
    out = []
    for idx, it in enumerate(items):
        try:
            w, v = it
        except (TypeError, ValueError):
            raise KnapsackInputError(f"item[{idx}] must be a (weight, value) pair, got {it!r}") from None
        out.append(Item(_as_uint32(w, f"item[{idx}].weight"), _as_uint32(v, f"item[{idx}].value")))
    if sum(it.value for it in out) > INT64_MAX:
        raise KnapsackInputError("total item value overflows the 64-bit accumulator")
    return out


def _max_cells() -> int:
    return int(os.getenv("KNAPSACK_MAX_CELLS", DEFAULT_MAX_CELLS))


def _check_size(n: int, capacity: int) -> None:
    cells = n * (capacity + 1)
    limit = _max_cells()
    if cells > limit:
        raise TableTooLargeError(
            f"DP table of {n} x {capacity + 1} = {cells} cells exceeds limit {limit} (KNAPSACK_MAX_CELLS)"
        )


def _fill(items: Sequence[Item], capacity: int, parity: bool, table=None) -> np.ndarray:
    """
    Forward pass over a rolling value row.
    Returns the n x (capacity+1) matrix of strict include-wins decisions, which is
    exactly where T[i][c] != T[i-1][c]. If `table` is given, each row is also written there.
    """
    best = np.zeros(capacity + 1, dtype=np.int64)
    take = np.zeros((len(items), capacity + 1), dtype=bool)
    for i, (w, v) in enumerate(items):
        lo = max(w, 1) if parity else w
        if lo <= capacity:
            cand = best[lo - w:capacity + 1 - w] + v
            better = cand > best[lo:]
            take[i, lo:] = better
            best[lo:] = np.where(better, cand, best[lo:])
        if table is not None:
            table[i + 1] = best
    return take


def _walk(chosen, items: Sequence[Item], capacity: int, parity: bool) -> List[bool]:
    selection = [False] * len(items)
    i, c = len(items), capacity
    # parity stops once the budget is spent, leaving any free prefix items out
    while i > 0 and (c > 0 or not parity):
        if chosen(i, c):
            selection[i - 1] = True
            c -= items[i - 1].weight
        i -= 1
    return selection


def solve(items, capacity, *, parity: bool = False) -> List[bool]:
    """
    Exact 0/1 knapsack by bottom-up DP and backward reconstruction (O(n*capacity)).

    Returns one bool per item; the chosen subset is feasible and of maximal value.
    Ties between including and excluding an item resolve to exclude.

    parity=True replays the reference behaviour bit for bit: budget column 0 is
    pinned to zero, zero capacity returns all-False, and the backward walk stops
    as soon as the budget reaches zero. With strictly positive weights both modes
    agree; with zero-weight items only the default mode is guaranteed optimal.
    """
    items = coerce_items(items)
    capacity = _as_uint32(capacity, "capacity")
    n = len(items)
    if n == 0 or (parity and capacity == 0):
        return [False] * n
    _check_size(n, capacity)
    logger.debug("knapsack dp: %d items x %d budgets (parity=%s)", n, capacity + 1, parity)

    take = _fill(items, capacity, parity)
    selection = _walk(lambda i, c: take[i - 1, c], items, capacity, parity)
    logger.debug("knapsack dp: selected %d of %d items", sum(selection), n)
    return selection


def dp_table(items, capacity, *, parity: bool = False) -> np.ndarray:
    """Full (n+1) x (capacity+1) table of best values, T[i][c] over the first i items."""
    items = coerce_items(items)
    capacity = _as_uint32(capacity, "capacity")
    _check_size(len(items) + 1, capacity)
    table = np.zeros((len(items) + 1, capacity + 1), dtype=np.int64)
    if parity and capacity == 0:
        return table
    _fill(items, capacity, parity, table=table)
    return table


def reconstruct(table: np.ndarray, items, capacity, *, parity: bool = False) -> List[bool]:
    items = coerce_items(items)
    capacity = _as_uint32(capacity, "capacity")
    if table.shape != (len(items) + 1, capacity + 1):
        raise KnapsackInputError(
            f"table shape {table.shape} does not match {len(items) + 1} x {capacity + 1}"
        )
    return _walk(lambda i, c: table[i, c] != table[i - 1, c], items, capacity, parity)


def selection_totals(items, selection: Sequence[bool]) -> Tuple[int, int]:
    weight = 0
    value = 0
    for (w, v), picked in zip(items, selection):
        if picked:
            weight += int(w)
            value += int(v)
    return weight, value


def solve_knapsack_dp(values: List[int], weights: List[int], capacity: int) -> Dict:
    """
    Knapsack via dynamic programming (O(n*capacity)).
    Returns best_value, picked_items (indices), total_weight.
    """
    if len(values) != len(weights):
        raise KnapsackInputError("values and weights must have matching lengths")
    items = [Item(w, v) for w, v in zip(weights, values)]
    selection = solve(items, capacity)
    picked = [i for i, s in enumerate(selection) if s]
    total_w, best_v = selection_totals(items, selection)
    return {
        "best_value": int(best_v),
        "picked_items": picked,
        "total_weight": int(total_w),
    }
