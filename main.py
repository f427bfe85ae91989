# ------------------------------------------------------------
# Date        : 2026-10-18
# File Name   : main.py
# Description : Compares several ways of summing a large array of integers:
#               a plain loop, hand made threads, thread pool tasks, a
#               declarative map/reduce and (optionally) MPI ranks.
#
# Usage       : python main.py
#               python main.py --workers 8 --sizes 1000000 --runs 3 --no-wait
#               mpiexec -n 4 python main.py --mpi
#
# Dependencies:
#       - numpy
#       - pandas
#       - mpi4py (only for --mpi)
#
# Notes:
#   - timings are wall clock, they vary with the machine and load
# ------------------------------------------------------------
import argparse

from benchmark import run_benchmark
from parallel_summer import NUMBER_OF_THREADS, ParallelSummer

DEFAULT_SIZES = [100_000, 1_000_000, 10_000_000]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark parallel summation strategies.")
    parser.add_argument('--workers', '-w', type=int, default=NUMBER_OF_THREADS,
                        help="threads/tasks per parallel sum (default: %(default)s)")
    parser.add_argument('--sizes',    type=int, nargs='+', default=DEFAULT_SIZES,
                        help="number of elements to sum, one benchmark per size")
    parser.add_argument('--runs',     type=int, default=1,
                        help="timed runs per method, the fastest is reported")
    parser.add_argument('--seed',     type=int, default=None)
    parser.add_argument('--mpi',      action='store_true',
                        help="also sum across MPI ranks (run under mpiexec)")
    parser.add_argument('--no-wait',  action='store_true',
                        help="exit without waiting for Enter")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if any(size < 0 for size in args.sizes):
        parser.error("--sizes must not be negative")
    if args.runs < 1:
        parser.error("--runs must be at least 1")

    mpi_mgr = None
    if args.mpi:
        # mpi4py is optional, only import it when asked for
        try:
            from mpiMGR import MPIManager
        except (ImportError, RuntimeError) as err:
            parser.error(f"--mpi requires mpi4py and an MPI library ({err})")
        mpi_mgr = MPIManager()

    try:
        summer = ParallelSummer(workers=args.workers, mpi_mgr=mpi_mgr)
    except ValueError as err:
        parser.error(str(err))

    # Only rank 0 prints (and waits) when running under MPI
    is_root = summer.rank == 0
    results = run_benchmark(summer, args.sizes, runs=args.runs, seed=args.seed, verbose=is_root)

    if is_root and not args.no_wait:
        input("Press Enter for exit: ")
    return results


if __name__ == "__main__":
    main()
