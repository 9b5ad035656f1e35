import warnings
from typing import List

from mcpi.errors import InvalidInputWarning


def partition(total: int, workers: int) -> List[int]:
    """Split ``total`` points across ``workers``.

    Every worker gets ``total // workers``; the last one also takes the
    remainder, so the shares always sum to ``total``.
    """
    if workers < 1:
        raise ValueError(f"a group needs at least one worker, got {workers}")
    base = total // workers
    shares = [base] * workers
    shares[-1] += total % workers
    return shares


def validate_input(total: int, workers: int) -> bool:
    # advisory only: callers run the (possibly all-zero) partition anyway
    if total <= 0:
        warnings.warn("number of points must be positive", InvalidInputWarning, stacklevel=2)
        return False
    if total < workers:
        warnings.warn(f"fewer points ({total}) than workers ({workers}), "
                      "some workers will have nothing to do",
                      InvalidInputWarning, stacklevel=2)
    return True
