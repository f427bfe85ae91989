# Date        : 2026-10-18
# File Name   : mpiMGR.py
from mpi4py import MPI
import numpy as np

class MPIManager:
    """
    A utility class to handle the MPI operations of the distributed sum using `mpi4py`.

    Methods:
    --------
    scatter_chunks(values, root=0)
        Splits the root's array into one chunk per process and sends each
        process its chunk.

    allreduce_sum(local_sum)
        Sums a value across all MPI processes; every process gets the total.
    """

    def __init__(self):
        # Initialize the MPI communicator
        self.comm = MPI.COMM_WORLD
        # Get the rank (ID) of the current process
        self.rank = self.comm.Get_rank()
        # Get the total number of processes
        self.size = self.comm.Get_size()

    def scatter_chunks(self, values, root: int = 0) -> np.ndarray:
        """
        Scatter near-equal contiguous chunks of `values` from the root process.

        Parameters:
        -----------
        values : np.ndarray
            The full array on the root process (ignored on the other ranks).
        root : int
            The rank that holds the array (default is 0).

        Returns:
        --------
        np.ndarray
            This process's chunk.
        """
        if self.rank == root:
            # array_split spreads the remainder, so no element is dropped
            chunks = np.array_split(values, self.size)
        else:
            chunks = None
        return self.comm.scatter(chunks, root=root)

    def allreduce_sum(self, local_sum: int) -> int:
        """Sum `local_sum` over all processes and return the total on every rank."""
        return self.comm.allreduce(local_sum, op=MPI.SUM)
