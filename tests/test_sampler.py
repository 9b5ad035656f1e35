import numpy as np

from mcpi.sampler import count_inside, make_rng, make_seed


def test_zero_count_returns_zero():
    for offset in (0, 1, 7):
        rng = make_rng(offset, now=0)
        assert count_inside(0, rng) == 0


def test_zero_count_draws_nothing():
    rng = np.random.default_rng(1)
    count_inside(0, rng)
    assert rng.random() == np.random.default_rng(1).random()


def test_negative_count_is_zero():
    assert count_inside(-3, np.random.default_rng(1)) == 0


def test_result_within_bounds():
    rng = make_rng(3, now=1_700_000_000)
    for n in (1, 10, 1000, 12345):
        inside = count_inside(n, rng)
        assert 0 <= inside <= n


def test_deterministic_for_fixed_seed():
    a = count_inside(10_000, make_rng(2, now=42))
    b = count_inside(10_000, make_rng(2, now=42))
    assert a == b


def test_chunking_does_not_change_bounds():
    rng = np.random.default_rng(5)
    inside = count_inside(2_500, rng, chunk_size=1000)
    assert 0 <= inside <= 2_500


def test_seed_salted_by_offset():
    assert make_seed(0, now=100.7) == 100
    assert make_seed(3, now=100) == 3100
    assert make_seed(1, now=100) != make_seed(2, now=100)


def test_ratio_close_to_quarter_pi():
    n = 1_000_000
    inside = count_inside(n, np.random.default_rng(2024))
    assert abs(4. * inside / n - np.pi) < 0.01
