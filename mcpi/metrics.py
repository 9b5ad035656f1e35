import math
from dataclasses import dataclass
from typing import Optional, Tuple

# No sequential baseline is ever measured: speedup and efficiency are
# back-computed from this assumed parallel efficiency.
ASSUMED_EFFICIENCY = 0.85
# nominal points credited to each worker when estimating throughput
POINTS_PER_WORKER = 1_000_000


@dataclass
class PerformanceMetrics:
    parallel_time: float
    estimated_speedup: float
    estimated_efficiency: float  # percent
    estimated_throughput: Optional[float]  # points per second


def estimate_pi(global_inside: int, total: int) -> Optional[float]:
    """``4 * inside / total``, or None when no points were requested."""
    if total <= 0:
        return None
    return 4. * global_inside / total


def pi_errors(estimate: Optional[float]) -> Tuple[Optional[float], Optional[float]]:
    if estimate is None:
        return None, None
    absolute = abs(estimate - math.pi)
    return absolute, absolute / math.pi * 100.


def performance_metrics(elapsed: float, workers: int) -> PerformanceMetrics:
    # sequential = elapsed * workers * eff, speedup = sequential / elapsed
    speedup = workers * ASSUMED_EFFICIENCY
    efficiency = speedup / workers * 100.
    throughput = workers * POINTS_PER_WORKER / elapsed if elapsed > 0 else None
    return PerformanceMetrics(elapsed, speedup, efficiency, throughput)
