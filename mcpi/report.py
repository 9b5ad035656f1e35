import math
import sys

RULE = "=" * 42
THIN_RULE = "-" * 42


def print_usage(prog, file=None):
    file = file or sys.stdout
    print(f"Usage: mpirun -np <num_processes> {prog} <total_points>", file=file)
    print(f"Example: mpirun -np 4 {prog} 1000000", file=file)


def print_header(workers, total, shares, file=None):
    file = file or sys.stdout
    print(RULE, file=file)
    print("Estimating pi with Monte Carlo over MPI", file=file)
    print(RULE, file=file)
    print(f"Number of processes: {workers}", file=file)
    print(f"Total points: {total}", file=file)
    print(f"Points per process: {shares[0]}", file=file)
    if shares[-1] != shares[0]:
        print(f"Points for process {workers - 1}: {shares[-1]} (includes remainder)", file=file)
    print(THIN_RULE, file=file)


def print_worker(rank, inside, share, file=None):
    file = file or sys.stdout
    print(f"Process {rank}: {inside} points inside the circle (of {share} points)", file=file, flush=True)


def print_summary(summary, file=None):
    file = file or sys.stdout
    print(THIN_RULE, file=file)
    print("FINAL RESULTS:", file=file)
    print(f"Total points inside the circle: {summary.global_inside}", file=file)
    if summary.pi_estimate is None:
        print("Estimated pi: undefined (no points sampled)", file=file)
        print(f"Actual pi: {math.pi:.6f}", file=file)
        print("Absolute error: undefined", file=file)
        print("Percentage error: undefined", file=file)
    else:
        print(f"Estimated pi: {summary.pi_estimate:.6f}", file=file)
        print(f"Actual pi: {math.pi:.6f}", file=file)
        print(f"Absolute error: {summary.absolute_error:.6f}", file=file)
        print(f"Percentage error: {summary.percent_error:.3f}%", file=file)
    print(f"Execution time: {summary.elapsed:.6f} seconds", file=file)

    metrics = summary.metrics
    print(THIN_RULE, file=file)
    print("PERFORMANCE METRICS (speedup, efficiency and throughput are estimates):", file=file)
    print(f"Parallel time: {metrics.parallel_time:.6f} seconds", file=file)
    print(f"Estimated speedup: {metrics.estimated_speedup:.2f}x", file=file)
    print(f"Estimated efficiency: {metrics.estimated_efficiency:.1f}%", file=file)
    if metrics.estimated_throughput is None:
        print("Estimated throughput: undefined", file=file)
    else:
        print(f"Estimated throughput: {metrics.estimated_throughput:.0f} points/second", file=file)
    print(RULE, file=file)
