from typing import Sequence

from classical.knapsack_dp import selection_totals


class SelectionCheckError(AssertionError):
    """A returned selection is the wrong length, overweight, or not optimal."""


def check_selection(case, selection: Sequence[bool]) -> None:
    """
    Validate a selection against a case with known best_value / max_weight / items.
    Raises SelectionCheckError on the first violated property.
    """
    if len(case.items) != len(selection):
        raise SelectionCheckError("Wrong length of the solution.")
    weight, value = selection_totals(case.items, selection)
    if weight > case.max_weight:
        raise SelectionCheckError("Selected items are too heavy.")
    if value != case.best_value:
        raise SelectionCheckError(f"Expected value {case.best_value} but got {value}.")
