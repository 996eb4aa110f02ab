from typing import List

import numpy as np

from classical.knapsack_dp import Item

SEED_MAX = 2**32 - 1


def mt19937_stream(seed: int, count: int) -> np.ndarray:
    """
    Raw 32-bit outputs of a Mersenne Twister seeded the classic way (init_genrand).
    Matches std::mt19937(seed) output for output.
    """
    seed = int(seed)
    if not 0 <= seed <= SEED_MAX:
        raise ValueError(f"seed must be in [0, {SEED_MAX}], got {seed}")
    # legacy RandomState keeps init_genrand seeding; full-range uint32 draws are unmasked
    rs = np.random.RandomState(seed)
    return rs.randint(0, 2**32, size=int(count), dtype=np.uint32)


def gen_items(item_count: int, avg_weight: int, seed: int) -> List[Item]:
    """Deterministic items with weights clustered just under avg_weight and values near 100x it."""
    n = int(item_count)
    avg = int(avg_weight)
    if n < 0 or avg < 0:
        raise ValueError("item_count and avg_weight must be non-negative")
    base_w = avg - avg // 10
    base_v = 100 * avg - 10 * avg
    w_diff = 1 + avg // 5
    v_diff = 1 + 20 * avg

    raw = mt19937_stream(seed, 2 * n).astype(np.int64).reshape(n, 2)
    weights = base_w + raw[:, 0] % w_diff
    values = base_v + raw[:, 1] % v_diff
    return [Item(int(w), int(v)) for w, v in zip(weights, values)]
