"""Size of the transaction log collection."""

from typing import Any

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from ...logging_config import get_logger
from .LogStats import LogStats
from .ScanError import ScanError

logger = get_logger("stats.scan_log")


def scan_log(collection: Any) -> LogStats:
    """Count the documents in the log collection with a single query.

    Raises:
        ScanError: If the count fails
    """
    try:
        count = collection.count_documents({})
    except (PyMongoError, BSONError) as e:
        raise ScanError(collection.name, "count items in collection", str(e)) from e
    logger.debug(f"Counted {count} log entries in {collection.name}")
    return LogStats(doc_count=count)
