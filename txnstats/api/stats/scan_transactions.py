"""State histogram of the transaction collection."""

import threading
from typing import Any

from ...constants import DEFAULT_BATCH_SIZE
from ...logging_config import get_logger
from ._stream_documents import _stream_documents
from .InProgressStats import InProgressStats
from .TransactionState import classify
from .TxnDoc import OPS_FIELD, STATE_FIELD, TxnDoc

logger = get_logger("stats.scan_transactions")


def scan_transactions(
    collection: Any,
    batch_size: int = DEFAULT_BATCH_SIZE,
    cancel: threading.Event | None = None,
) -> InProgressStats:
    """Count transactions per state and their operations.

    Raises:
        ScanError: If the cursor fails or a document cannot be decoded
    """
    logger.debug(f"Scanning transactions in {collection.name}")
    documents = _stream_documents(collection, {OPS_FIELD: 1, STATE_FIELD: 1}, TxnDoc, batch_size, cancel)
    stats = InProgressStats.from_transactions((classify(doc.state), len(doc.ops)) for doc in documents)
    logger.debug(f"Scanned {stats.total_txns} transaction(s) in {collection.name}")
    return stats
