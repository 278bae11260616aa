"""Concurrent scan-and-aggregate over the transaction bookkeeping collections."""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from types import MappingProxyType
from typing import Any, NamedTuple

from pymongo.errors import PyMongoError

from ...constants import DEFAULT_BATCH_SIZE, DEFAULT_CONCURRENCY, TXNS_COLLECTION
from ...logging_config import get_logger
from ..database.Database import Database
from .CollectionStats import CollectionStats
from .InProgressStats import InProgressStats
from .LogStats import LogStats
from .QueueDoc import QueueDoc
from .scan_collection import scan_collection
from .scan_log import scan_log
from .scan_transactions import scan_transactions
from .ScanError import ScanError
from .StashDoc import StashDoc
from .StatsReport import StatsReport
from .want_collection_stats import want_collection_stats

logger = get_logger("stats.aggregate")


class _Unit(NamedTuple):
    """One unit of work: which scan it is and where its result goes."""

    kind: str  # "collection", "transactions" or "log"
    collection: str
    slot: int = -1

    @property
    def operation(self) -> str:
        return "count items in collection" if self.kind == "log" else "iterate over collection"


def _as_scan_error(unit: _Unit, error: BaseException) -> BaseException:
    """Name the collection in failures that escaped the scanner's own wrapping."""
    if isinstance(error, ScanError) or not isinstance(error, Exception):
        return error
    wrapped = ScanError(unit.collection, unit.operation, str(error))
    wrapped.__cause__ = error
    return wrapped


def aggregate_stats(
    database: Database,
    concurrency: int = DEFAULT_CONCURRENCY,
    batch_size: int = DEFAULT_BATCH_SIZE,
    txns_collection: str = TXNS_COLLECTION,
) -> StatsReport:
    """Scan every eligible collection, the transactions and the log, and merge the results.

    Collection names are listed once and sorted; each one keeps its index in
    that order as its result slot. All scans run on a pool of at most
    ``concurrency`` threads sharing the database client. This thread is the
    only one that writes slots or looks at errors.

    The run fails as a whole: the first error seen is kept, running scans are
    told to stop, queued scans are cancelled, and once the pool has drained
    that error is raised. Nothing from the failed run is returned.

    Args:
        database: Open database (inside its ``with`` block)
        concurrency: Maximum number of scans in flight
        batch_size: Cursor batch size for the streaming scans
        txns_collection: Name of the transaction collection; its log is ``<name>.log``

    Returns:
        The merged report, keeping only collections with queued transactions

    Raises:
        ScanError: The first failure of any scan, or failure to list collections
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1 (found: {concurrency})")

    try:
        names = sorted(database.list_collection_names())
    except PyMongoError as e:
        raise ScanError(database.name, "list collections in database", str(e)) from e

    stash_collection = f"{txns_collection}.stash"
    log_collection = f"{txns_collection}.log"
    eligible = [(index, name) for index, name in enumerate(names) if want_collection_stats(name, txns_collection)]
    logger.info(
        f"Found {len(names)} collection(s) in {database.name}, scanning {len(eligible)} "
        f"with up to {concurrency} in flight"
    )

    slots: list[CollectionStats | None] = [None] * len(names)
    in_progress = InProgressStats()
    log_stats = LogStats()
    cancel = threading.Event()
    first_error: BaseException | None = None

    with ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix="txnstats-scan") as pool:
        units: dict[Future[Any], _Unit] = {}
        for index, name in eligible:
            model = StashDoc if name == stash_collection else QueueDoc
            future = pool.submit(scan_collection, database.collection(name), batch_size, cancel, model)
            units[future] = _Unit("collection", name, index)
        units[pool.submit(scan_transactions, database.collection(txns_collection), batch_size, cancel)] = _Unit(
            "transactions", txns_collection
        )
        units[pool.submit(scan_log, database.collection(log_collection))] = _Unit("log", log_collection)

        for future in as_completed(units):
            unit = units[future]
            if future.cancelled():
                continue
            error = future.exception()
            if error is not None:
                if first_error is None:
                    first_error = _as_scan_error(unit, error)
                    logger.error(f"Scan of {unit.collection} failed, abandoning run: {error}")
                    cancel.set()
                    for pending in units:
                        pending.cancel()
                else:
                    logger.debug(f"Discarding later failure of {unit.collection}: {error}")
                continue
            if first_error is not None:
                continue
            if unit.kind == "collection":
                slots[unit.slot] = future.result()
            elif unit.kind == "transactions":
                in_progress = future.result()
            else:
                log_stats = future.result()

    if first_error is not None:
        raise first_error

    collections = {}
    for index, name in eligible:
        stats = slots[index]
        if stats is not None and stats.total_queued > 0:
            collections[name] = stats

    return StatsReport(
        collections=MappingProxyType(collections),
        in_progress=in_progress,
        log=log_stats,
    )
