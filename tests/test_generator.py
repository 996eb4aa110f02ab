import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from data.generator import gen_items, mt19937_stream


def test_stream_matches_std_mt19937_default_seed():
    # a default-constructed std::mt19937 (seed 5489) yields 4123659995 on its 10000th call
    stream = mt19937_stream(5489, 10000)
    assert int(stream[-1]) == 4123659995


def test_stream_prefix_is_stable():
    long = mt19937_stream(298470443, 64)
    short = mt19937_stream(298470443, 10)
    assert long[:10].tolist() == short.tolist()


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_stream_rejects_out_of_range_seed(seed):
    with pytest.raises(ValueError):
        mt19937_stream(seed, 1)


def test_gen_items_is_deterministic():
    assert gen_items(50, 40, 12345) == gen_items(50, 40, 12345)
    assert gen_items(50, 40, 12345) != gen_items(50, 40, 12346)


@pytest.mark.parametrize("avg", [1, 9, 19, 43, 169])
def test_gen_items_ranges(avg):
    items = gen_items(200, avg, 2942770775)
    assert len(items) == 200
    base_w = avg - avg // 10
    base_v = 90 * avg
    for w, v in items:
        assert base_w <= w <= base_w + avg // 5
        assert base_v <= v <= base_v + 20 * avg


def test_gen_items_uses_draws_in_pairs():
    raw = mt19937_stream(7, 6).tolist()
    avg = 20
    items = gen_items(3, avg, 7)
    for k, (w, v) in enumerate(items):
        assert w == avg - avg // 10 + raw[2 * k] % (1 + avg // 5)
        assert v == 90 * avg + raw[2 * k + 1] % (1 + 20 * avg)


def test_gen_items_empty():
    assert gen_items(0, 10, 1) == []


def test_gen_items_rejects_negative_count():
    with pytest.raises(ValueError):
        gen_items(-1, 10, 1)
