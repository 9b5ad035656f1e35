import time

import numpy as np

# points drawn per vectorised step, bounds memory for very large shares
CHUNK_SIZE = 1_000_000
SEED_STRIDE = 1000


def make_seed(seed_offset: int, now=None) -> int:
    # wall-clock seconds salted by the worker id; workers starting in the
    # same second with colliding offsets get the same stream
    if now is None:
        now = time.time()
    return int(now) + seed_offset * SEED_STRIDE


def make_rng(seed_offset: int, now=None) -> np.random.Generator:
    return np.random.default_rng(make_seed(seed_offset, now))


def count_inside(count: int, rng: np.random.Generator, chunk_size: int = CHUNK_SIZE) -> int:
    """Number of ``count`` uniform points in [-1,1]x[-1,1] with x^2+y^2 <= 1."""
    inside = 0
    remaining = count
    while remaining > 0:
        n = min(remaining, chunk_size)
        x = 2. * rng.random(n) - 1.
        y = 2. * rng.random(n) - 1.
        inside += int(np.count_nonzero(x*x + y*y <= 1.))
        remaining -= n
    return inside
