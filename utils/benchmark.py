import time

import numpy as np
import pandas as pd

from classical.knapsack_dp import solve, selection_totals
from data.generator import gen_items
from utils.resources import estimate_table_resources
from utils.validate import check_selection, SelectionCheckError


def run_suite(cases, suite="custom"):
    rows = []
    for idx, case in enumerate(cases):
        t0 = time.perf_counter()
        sel = solve(case.items, case.max_weight)
        elapsed = time.perf_counter() - t0
        weight, value = selection_totals(case.items, sel)
        try:
            check_selection(case, sel)
            error = None
        except SelectionCheckError as e:
            error = str(e)
        rows.append({
            "suite": suite,
            "case": int(idx),
            "items": len(case.items),
            "capacity": int(case.max_weight),
            "expected": int(case.best_value),
            "value": int(value),
            "weight": int(weight),
            "ok": error is None,
            "error": error,
            "seconds": float(elapsed),
        })
    return pd.DataFrame(rows, columns=[
        "suite", "case", "items", "capacity", "expected", "value", "weight", "ok", "error", "seconds",
    ])


def sweep_generated(item_counts, avg_weight=20, capacity_ratio=0.5, trials=3, seed=42):
    rng = np.random.default_rng(int(seed))
    rows = []
    for n in item_counts:
        for t in range(int(trials)):
            s = int(rng.integers(0, 2**32 - 1))
            items = gen_items(n, avg_weight, s)
            capacity = int(capacity_ratio * sum(it.weight for it in items))
            res = estimate_table_resources(len(items), capacity)
            t0 = time.perf_counter()
            sel = solve(items, capacity)
            elapsed = time.perf_counter() - t0
            weight, value = selection_totals(items, sel)
            rows.append({
                "n": int(n),
                "trial": int(t),
                "seed": s,
                "capacity": capacity,
                "best_value": int(value),
                "total_weight": int(weight),
                "picked": int(sum(sel)),
                "cells": res["cells"],
                "working_mb": res["working_bytes"] / 2**20,
                "seconds": float(elapsed),
            })
    return pd.DataFrame(rows)
