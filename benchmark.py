# Date        : 2026-10-18
# File Name   : benchmark.py
import time

import pandas as pd

from example_data_generator import generate_random_array

SEPARATOR = '_' * 50


def time_method(sum_method, array, runs: int = 1):
    """
    Call `sum_method(array)` `runs` times and keep the fastest run.

    Returns:
    --------
    tuple :
        - total : int
            The sum returned by the method.
        - elapsed_ms : float
            Fastest wall time in milliseconds.
    """
    total = None
    elapsed_ms = float("inf")  # Initialize with infinity
    for _ in range(runs):
        start = time.perf_counter()
        total = sum_method(array)
        elapsed_ms = min(elapsed_ms, (time.perf_counter() - start) * 1000)
    return total, elapsed_ms


def show_result(sum_method, array, count: int, runs: int = 1, verbose: bool = True) -> dict:
    """Time one sum method, print its result line and return it as a record."""
    total, elapsed_ms = time_method(sum_method, array, runs)
    if verbose:
        print(f"{sum_method.__name__} =\t{total} in {elapsed_ms:.2f} ms")
    return {"method": sum_method.__name__, "count": count, "sum": total, "elapsed_ms": elapsed_ms}


def do_sum_all_ways(summer, count: int, runs: int = 1, seed=None, verbose: bool = True) -> list:
    """
    Generate `count` random integers and sum them with every method of `summer`.

    Parameters:
    -----------
    summer : ParallelSummer
        Provides the sum methods and the worker count.
    count : int
        Number of elements to sum.
    runs : int
        Timed runs per method, the fastest is reported.
    seed : int
        Optional seed for the random data.
    verbose : bool
        Print the header, one line per method and the separator.
    """
    if verbose:
        print(f"Calculating the sum for {count} elements:\n")

    # only rank 0 needs the data, the other MPI ranks receive their chunk by scatter
    array = generate_random_array(count if summer.rank == 0 else 0, seed)

    records = [show_result(method, array, count, runs, verbose) for method in summer.methods()]

    if verbose:
        print(SEPARATOR)
    return records


def check_agreement(results: pd.DataFrame):
    """Raise if the methods returned different totals for the same input array (one round)."""
    distinct = results.groupby("round")["sum"].nunique()
    mismatched = distinct[distinct > 1]
    if not mismatched.empty:
        raise RuntimeError(
            f"Sum methods disagree in round(s) {mismatched.index.tolist()}: "
            f"{results[results['round'].isin(mismatched.index)].to_dict('records')}"
        )


def summarize(results: pd.DataFrame) -> pd.DataFrame:
    """Table of elapsed milliseconds: one row per method, one column per round labelled by its size."""
    table = results.pivot_table(index="method", columns="round", values="elapsed_ms", aggfunc="min")
    # a size may be benchmarked more than once, so columns are rounds shown by their count
    counts = results.groupby("round")["count"].first()
    table.columns = pd.Index(counts.loc[table.columns].tolist(), name="count")
    # keep the methods in the order they were run instead of alphabetical
    return table.reindex(pd.unique(results["method"]))


def run_benchmark(summer, sizes, runs: int = 1, seed=None, verbose: bool = True) -> pd.DataFrame:
    """
    Run `do_sum_all_ways` for every size, check the totals agree and print a summary.

    Every size is one round with its own random array, so repeated sizes are
    checked and reported separately.

    Returns:
    --------
    pd.DataFrame
        One row per (round, method) with columns round, method, count, sum and elapsed_ms.
    """
    records = []
    for round_id, count in enumerate(sizes):
        for record in do_sum_all_ways(summer, count, runs=runs, seed=seed, verbose=verbose):
            records.append({"round": round_id, **record})

    results = pd.DataFrame(records, columns=["round", "method", "count", "sum", "elapsed_ms"])
    check_agreement(results)

    if verbose and not results.empty:
        print("\nElapsed time (ms) per method:")
        print(summarize(results).to_string(float_format=lambda ms: f"{ms:.2f}"))
        print()
    return results
