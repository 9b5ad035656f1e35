import logging
import os
import re
import sys
import threading

from mcpi import coordinator, report
from mcpi.errors import UsageError

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_worker = threading.local()
_filter_lock = threading.Lock()


def parse_total(text: str) -> int:
    # same leniency as atoll: leading digits count, anything else is 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv) -> int:
    if len(argv) != 2:
        raise UsageError(f"expected 1 argument, got {len(argv) - 1}")
    return parse_total(argv[1])


def prog_name(argv):
    if not argv or argv[0].endswith("__main__.py"):
        return "python -m mcpi"
    return os.path.basename(argv[0])


class RankFilter(logging.Filter):
    """Stamps each record with the rank of the worker that logged it.

    The rank is per thread, so members of an in-process group sharing one
    root handler still log under their own rank.
    """

    def filter(self, record):
        record.rank = getattr(_worker, "rank", "-")
        return True


def configure_logging(rank):
    _worker.rank = rank
    logging.basicConfig(level=logging.INFO,
                        format="[rank %(rank)s] %(levelname)s %(name)s: %(message)s")
    with _filter_lock:
        for handler in logging.getLogger().handlers:
            if not any(isinstance(f, RankFilter) for f in handler.filters):
                handler.addFilter(RankFilter())
        logging.captureWarnings(True)


def main(argv=None, group=None) -> int:
    argv = sys.argv if argv is None else argv
    if group is None:
        from mcpi.mpi import MPIGroup
        group = MPIGroup()

    configure_logging(group.rank)
    logger.debug("process %d of %d initialized", group.rank, group.size)

    try:
        total = parse_args(argv)
    except UsageError as e:
        logger.debug("usage error: %s", e)
        if group.is_lead:
            report.print_usage(prog_name(argv))
        return 1

    try:
        coordinator.run(group, total)
    except Exception:
        logger.exception("worker %d failed, aborting the group", group.rank)
        group.abort(1)
        raise
    return 0
