import itertools
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from classical.knapsack_dp import selection_totals, solve
from data.sample_items import (
    BIG_CASES,
    FIXED_CASES,
    MID_CASES,
    SMALL_CASES,
    SUITES,
    iter_suite,
)
from utils.validate import check_selection


@pytest.mark.parametrize("case", FIXED_CASES)
def test_fixed_cases(case):
    check_selection(case, solve(case.items, case.max_weight))


@pytest.mark.parametrize("gen", SMALL_CASES, ids=lambda g: str(g.seed))
def test_small_suite(gen):
    case = gen.build()
    assert len(case.items) == gen.item_count
    check_selection(case, solve(case.items, case.max_weight))
    check_selection(case, solve(case.items, case.max_weight, parity=True))


@pytest.mark.parametrize("gen", SMALL_CASES[:3], ids=lambda g: str(g.seed))
def test_small_suite_golden_value_is_brute_force_optimum(gen):
    case = gen.build()
    best = 0
    for mask in itertools.product([False, True], repeat=len(case.items)):
        w, v = selection_totals(case.items, mask)
        if w <= case.max_weight:
            best = max(best, v)
    assert best == case.best_value


@pytest.mark.parametrize("gen", MID_CASES, ids=lambda g: str(g.seed))
def test_mid_suite(gen):
    case = gen.build()
    check_selection(case, solve(case.items, case.max_weight))


@pytest.mark.slow
@pytest.mark.parametrize("gen", BIG_CASES, ids=lambda g: str(g.seed))
def test_big_suite(gen):
    case = gen.build()
    check_selection(case, solve(case.items, case.max_weight))


def test_suite_sizes():
    assert len(FIXED_CASES) == 6
    assert [len(SUITES[s]) for s in ("small", "mid", "big")] == [20, 20, 20]


def test_iter_suite_builds_items():
    cases = list(iter_suite("small"))
    assert len(cases) == 20
    assert all(len(c.items) == 13 for c in cases)


def test_iter_suite_unknown_name():
    with pytest.raises(KeyError):
        list(iter_suite("huge"))
