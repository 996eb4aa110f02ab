import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from classical.knapsack_dp import Item
from data.sample_items import KnapsackCase
from utils.validate import SelectionCheckError, check_selection

CASE = KnapsackCase(best_value=7, max_weight=7, items=[Item(1, 1), Item(4, 5), Item(6, 6)])


def test_accepts_optimal_selection():
    check_selection(CASE, [True, False, True])


def test_wrong_length():
    with pytest.raises(SelectionCheckError, match="Wrong length of the solution."):
        check_selection(CASE, [True, False])


def test_too_heavy():
    with pytest.raises(SelectionCheckError, match="Selected items are too heavy."):
        check_selection(CASE, [False, True, True])


def test_suboptimal_value():
    with pytest.raises(SelectionCheckError, match="Expected value 7 but got 6."):
        check_selection(CASE, [True, True, False])


def test_is_an_assertion_error():
    assert issubclass(SelectionCheckError, AssertionError)
