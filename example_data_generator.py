# Date        : 2026-10-18
# File Name   : example_data_generator.py
import numpy as np

# Random values are drawn from [0, INT32_MAX)
INT32_MAX = np.iinfo(np.int32).max

def generate_random_array(count: int, seed=None) -> np.ndarray:
    """
    Generate an array of random non-negative 32-bit integers to sum.

    Parameters:
    -----------
    count : int
        Number of elements.
    seed : int
        Optional seed so runs can be repeated (default: fresh entropy).
    """
    if count < 0:
        raise ValueError(f"Cannot generate an array with {count} elements.")
    rng = np.random.default_rng(seed)
    return rng.integers(0, INT32_MAX, size=count, dtype=np.int32)
