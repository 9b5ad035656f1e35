from mpi4py import MPI

from mcpi.group import Group, LEAD_RANK


class MPIGroup(Group):
    """Process group backed by an MPI communicator (COMM_WORLD by default)."""

    def __init__(self, comm=None):
        self.comm = MPI.COMM_WORLD if comm is None else comm
        self.rank = self.comm.Get_rank()
        self.size = self.comm.Get_size()

    def barrier(self):
        self.comm.Barrier()

    def reduce_sum(self, value, root=LEAD_RANK):
        return self.comm.reduce(value, op=MPI.SUM, root=root)

    def wtime(self):
        return MPI.Wtime()

    def abort(self, code=1):
        self.comm.Abort(code)
