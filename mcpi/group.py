import threading
import time
from typing import Callable, List, Optional

LEAD_RANK = 0


class Group:
    """A fixed set of workers that can meet at a barrier and sum one value.

    ``reduce_sum`` returns the total on ``root`` and ``None`` everywhere else.
    """
    rank: int
    size: int

    @property
    def is_lead(self) -> bool:
        return self.rank == LEAD_RANK

    def barrier(self) -> None:
        raise NotImplementedError

    def reduce_sum(self, value: int, root: int = LEAD_RANK) -> Optional[int]:
        raise NotImplementedError

    def wtime(self) -> float:
        raise NotImplementedError

    def abort(self, code: int = 1) -> None:
        raise NotImplementedError


class ThreadMember(Group):

    def __init__(self, group: "ThreadGroup", rank: int):
        self.group = group
        self.rank = rank
        self.size = group.size

    def barrier(self):
        self.group._barrier.wait()

    def reduce_sum(self, value, root=LEAD_RANK):
        g = self.group
        g._slots[self.rank] = value
        g._barrier.wait()
        total = sum(g._slots) if self.rank == root else None
        # nobody may overwrite a slot before root has read them all
        g._barrier.wait()
        return total

    def wtime(self):
        return time.perf_counter()

    def abort(self, code=1):
        self.group._barrier.abort()


class ThreadGroup:
    """In-process group, one thread per member, sharing a ``threading.Barrier``."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"a group needs at least one worker, got {size}")
        self.size = size
        self._barrier = threading.Barrier(size)
        self._slots = [0] * size

    def member(self, rank: int) -> ThreadMember:
        if not 0 <= rank < self.size:
            raise ValueError(f"rank {rank} outside group of {self.size}")
        return ThreadMember(self, rank)

    def run(self, target: Callable, *args) -> List:
        """Call ``target(member, *args)`` on every member in parallel.

        Returns the results ordered by rank. If a member raises, the barrier
        is broken so the others stop waiting, and the first real error is
        re-raised here.
        """
        results = [None] * self.size
        errors = [None] * self.size

        def work(rank):
            try:
                results[rank] = target(self.member(rank), *args)
            except BaseException as e:
                errors[rank] = e
                self._barrier.abort()

        threads = [threading.Thread(target=work, args=(rank,), name=f"worker-{rank}")
                   for rank in range(self.size)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        failures = [e for e in errors if e is not None]
        if failures:
            primary = [e for e in failures if not isinstance(e, threading.BrokenBarrierError)]
            raise (primary or failures)[0]
        return results
