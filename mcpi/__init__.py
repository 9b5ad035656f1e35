"""Distributed Monte Carlo estimation of pi over an MPI process group."""

from mcpi.coordinator import run, WorkerReport, RunSummary
from mcpi.partition import partition, validate_input
from mcpi.sampler import count_inside, make_rng, make_seed

__version__ = "0.1.0"
