# Date        : 2026-10-18
# File Name   : parallel_summer.py
import functools
import numbers
import operator
import threading
from concurrent.futures import ThreadPoolExecutor, wait

import numpy as np

from partition import plan_partitions

# Default number of workers for the multithreaded sum methods
NUMBER_OF_THREADS = 4


def as_int_array(array) -> np.ndarray:
    """
    View the input as a one-dimensional numpy integer array.

    Lists and tuples are converted once; numpy arrays are used as-is (no copy).
    An empty input becomes an empty int64 array.
    """
    values = np.asarray(array)
    if values.ndim != 1:
        raise ValueError(f"Expected a one-dimensional sequence, got {values.ndim} dimension(s).")
    if values.size == 0:
        return values.astype(np.int64)
    if values.dtype.kind not in "iu":
        raise TypeError(f"Expected a sequence of integers, got dtype {values.dtype}.")
    return values


def sum_partition(worker_id: int, values: np.ndarray, partials: np.ndarray, bounds: tuple):
    """Sum values[start:end] into this worker's own slot of `partials`."""
    start, end = bounds
    # int64 accumulator so int32 inputs can't overflow
    partials[worker_id] = values[start:end].sum(dtype=np.int64)


class ParallelSummer:
    """
    Sums an integer array several ways so the approaches can be timed side by side.

    Parameters:
    -----------
    workers : int
        Number of threads/tasks the parallel methods split the array across (default: 4).
    mpi_mgr : MPIManager
        Optional MPIManager instance; enables `mpi_sum`.

    Methods:
    --------
    simple_sum(array)           -- Single loop, single accumulator (the reference result).
    thread_sum(array)           -- One threading.Thread per partition, joined before reducing.
    task_sum(array)             -- One pool task per partition, wait-all before reducing.
    parallel_query_sum(array)   -- Map to int64, parallel map over chunks, reduce.
    mpi_sum(array)              -- Scatter chunks across MPI ranks, all-reduce the partial sums.
    methods()                   -- The sum methods this instance can run, in benchmark order.
    """

    def __init__(self, workers=NUMBER_OF_THREADS, mpi_mgr=None):
        if isinstance(workers, bool) or not isinstance(workers, numbers.Integral):
            raise TypeError(f"workers must be an integer, got {type(workers).__name__}")
        if workers < 1:
            raise ValueError(
                f"Cannot split work across {workers} workers: "
                f"at least one worker is required."
            )
        self.workers = int(workers)
        self.manager = mpi_mgr
        self.rank    = mpi_mgr.rank if mpi_mgr else 0

    def simple_sum(self, array) -> int:
        """Plain sequential sum."""
        values = as_int_array(array)
        return int(values.sum(dtype=np.int64))

    def thread_sum(self, array) -> int:
        """
        Parallel sum using one dedicated thread per partition.

        Each thread writes only its own slot of the partial sum array, so no
        locking is needed. All threads are joined before the partials are added.
        A failure inside a thread is re-raised here after the join.
        """
        values = as_int_array(array)
        partials = np.zeros(self.workers, dtype=np.int64)
        # one error slot per worker, same ownership rule as `partials`
        errors = [None] * self.workers

        def run_worker(worker_id, bounds):
            try:
                sum_partition(worker_id, values, partials, bounds)
            except Exception as err:
                errors[worker_id] = err

        threads = []
        for worker_id, bounds in enumerate(plan_partitions(len(values), self.workers)):
            thread = threading.Thread(target=run_worker, args=(worker_id, bounds))
            thread.start()
            threads.append(thread)

        for thread in threads:
            thread.join()
        for err in errors:
            if err is not None:
                raise err
        return int(partials.sum())

    def task_sum(self, array) -> int:
        """
        Parallel sum using tasks submitted to a thread pool.

        Same partitioning as `thread_sum`, but the work is queued on an executor
        and the caller blocks until every task is done.
        """
        values = as_int_array(array)
        partials = np.zeros(self.workers, dtype=np.int64)

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            tasks = [
                pool.submit(sum_partition, worker_id, values, partials, bounds)
                for worker_id, bounds in enumerate(plan_partitions(len(values), self.workers))
            ]
            wait(tasks)
            for task in tasks:
                # re-raise anything that failed inside a task
                task.result()
        return int(partials.sum())

    def parallel_query_sum(self, array) -> int:
        """
        Declarative parallel reduction: map to int64, sum the chunks in parallel, reduce.

        Chunking is left to numpy.array_split, which spreads any remainder over
        the chunks instead of using `plan_partitions`.
        """
        wide = as_int_array(array).astype(np.int64, copy=False)
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            chunk_sums = pool.map(np.sum, np.array_split(wide, self.workers))
            return int(functools.reduce(operator.add, chunk_sums, 0))

    def mpi_sum(self, array) -> int:
        """
        Distributed sum across MPI ranks.

        Rank 0 scatters one chunk of its array to every rank, each rank sums its
        chunk and the partial sums are all-reduced, so every rank returns the total.
        The array passed on the other ranks is ignored.
        """
        if self.manager is None:
            raise RuntimeError("mpi_sum requires an MPIManager: pass mpi_mgr to ParallelSummer.")

        values = as_int_array(array) if self.rank == 0 else None
        chunk = self.manager.scatter_chunks(values)
        local_sum = int(chunk.sum(dtype=np.int64))
        return int(self.manager.allreduce_sum(local_sum))

    def methods(self) -> list:
        """Return the bound sum methods to benchmark, in order."""
        # non-root ranks only join the collective, the local methods run on rank 0
        if self.manager and self.rank != 0:
            return [self.mpi_sum]

        methods = [self.simple_sum, self.thread_sum, self.task_sum, self.parallel_query_sum]
        if self.manager:
            methods.append(self.mpi_sum)
        return methods
