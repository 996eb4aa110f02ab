import logging
import os
import sys

from classical.knapsack_dp import solve
from data.sample_items import iter_suite
from utils.validate import check_selection, SelectionCheckError

SUITES = [s.strip() for s in os.getenv("KNAPSACK_SUITES", "fixed,small,mid,big").split(",") if s.strip()]
LOG_LEVEL = os.getenv("KNAPSACK_LOG_LEVEL", "WARNING").upper()

TITLES = {
    "small": "Small tests...",
    "mid": "Medium tests...",
    "big": "Big tests...",
}


def run(suites):
    for name in suites:
        if name in TITLES:
            print(f"[check] {TITLES[name]}", flush=True)
        for idx, case in enumerate(iter_suite(name)):
            try:
                check_selection(case, solve(case.items, case.max_weight))
            except SelectionCheckError as e:
                raise SelectionCheckError(f"{name}[{idx}]: {e}") from e


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run(SUITES)
    except SelectionCheckError as e:
        print(f"[check] FAILED {e}", file=sys.stderr)
        sys.exit(1)
    print("[check] All tests passed.")


if __name__ == "__main__":
    main()
