import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from mcpi import report
from mcpi.group import Group, LEAD_RANK
from mcpi.metrics import PerformanceMetrics, estimate_pi, performance_metrics, pi_errors
from mcpi.partition import partition, validate_input
from mcpi.sampler import count_inside, make_rng

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    total: int
    workers: int
    shares: List[int]
    global_inside: int
    elapsed: float
    pi_estimate: Optional[float] = field(init=False)
    absolute_error: Optional[float] = field(init=False)
    percent_error: Optional[float] = field(init=False)
    metrics: PerformanceMetrics = field(init=False)

    def __post_init__(self):
        self.pi_estimate = estimate_pi(self.global_inside, self.total)
        self.absolute_error, self.percent_error = pi_errors(self.pi_estimate)
        self.metrics = performance_metrics(self.elapsed, self.workers)


@dataclass
class WorkerReport:
    rank: int
    share: int
    inside: int
    elapsed: float
    summary: Optional[RunSummary] = None  # lead worker only


def run(group: Group, total: int, now=None, rng: Optional[np.random.Generator] = None,
        verbose: bool = True) -> WorkerReport:
    """Run one estimation on ``group``; every member must call this.

    ``now`` fixes the wall-clock part of the seed and ``rng`` replaces the
    generator outright, both for reproducible runs.
    """
    rank, size = group.rank, group.size
    shares = partition(total, size)
    share = shares[rank]

    if rank == LEAD_RANK:
        validate_input(total, size)
        if verbose:
            report.print_header(size, total, shares)

    if rng is None:
        rng = make_rng(rank, now)

    group.barrier()
    start = group.wtime()

    inside = count_inside(share, rng)

    group.barrier()
    elapsed = group.wtime() - start
    logger.debug("worker %d sampled %d points in %.6fs", rank, share, elapsed)

    if verbose:
        report.print_worker(rank, inside, share)

    global_inside = group.reduce_sum(inside, root=LEAD_RANK)

    result = WorkerReport(rank, share, inside, elapsed)
    if rank == LEAD_RANK:
        result.summary = RunSummary(total, size, shares, global_inside, elapsed)
        if verbose:
            report.print_summary(result.summary)
    return result
