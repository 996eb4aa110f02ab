import numpy as np


def estimate_table_resources(item_count: int, capacity: int):
    n = int(item_count)
    cols = int(capacity) + 1
    cells = n * cols
    decision_bytes = cells * np.dtype(bool).itemsize
    row_bytes = cols * np.dtype(np.int64).itemsize
    return {
        "items": n,
        "budgets": cols,
        "cells": int(cells),
        "decision_bytes": int(decision_bytes),
        "value_row_bytes": int(row_bytes),
        "full_table_bytes": int((n + 1) * row_bytes),
        "working_bytes": int(decision_bytes + row_bytes),
    }
