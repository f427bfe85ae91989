# Date        : 2026-10-18
# File Name   : partition.py
import numbers


def plan_partitions(length: int, workers: int) -> list:
    """
    Split the index range [0, length) into one contiguous half-open range per worker.

    Every worker gets `length // workers` elements. The last worker's upper
    bound is pinned to `length`, so it also absorbs the remainder. When there
    are more workers than elements the leading workers get empty ranges.

    Parameters:
    -----------
    length : int
        Number of elements in the input sequence.
    workers : int
        Number of workers (threads or tasks) to split the work across.

    Returns:
    --------
    list of tuple
        `workers` (start, end) pairs, ordered, disjoint and covering [0, length).

    Example:
    --------
    >>> plan_partitions(10, 4)
    [(0, 2), (2, 4), (4, 6), (6, 10)]
    """
    for name, value in (("length", length), ("workers", workers)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if workers < 1:
        raise ValueError(f"Cannot partition across {workers} workers: at least one worker is required.")
    if length < 0:
        raise ValueError(f"Cannot partition a sequence of negative length {length}.")

    # chunk size every worker gets before the remainder is handed out
    step = length // workers
    ranges = []
    for i in range(workers):
        start = i * step
        # the last worker picks up whatever the floor division left behind
        end = length if i == workers - 1 else (i + 1) * step
        ranges.append((int(start), int(end)))
    return ranges
