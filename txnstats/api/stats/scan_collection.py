"""Queue depth statistics for a single collection."""

import threading
from functools import reduce
from typing import Any

from ...constants import DEFAULT_BATCH_SIZE
from ...logging_config import get_logger
from ._stream_documents import _stream_documents
from .CollectionStats import CollectionStats
from .QueueDoc import QueueDoc

logger = get_logger("stats.scan_collection")


def scan_collection(
    collection: Any,
    batch_size: int = DEFAULT_BATCH_SIZE,
    cancel: threading.Event | None = None,
    model: type[QueueDoc] = QueueDoc,
) -> CollectionStats:
    """Fold every document's ``txn-queue`` length into ``CollectionStats``.

    Only the fields ``model`` declares are fetched (the queue, plus the
    revision and markers for stash entries), ``batch_size`` documents at a
    time, so memory use does not grow with the collection.

    Args:
        collection: Collection handle (pymongo or mongomock)
        batch_size: Cursor batch size
        cancel: Optional event that aborts the scan when set
        model: Document model to decode against (``StashDoc`` for the stash)

    Raises:
        ScanError: If the cursor fails or a document cannot be decoded
    """
    logger.debug(f"Scanning queues in {collection.name}")
    documents = _stream_documents(collection, model.projection(), model, batch_size, cancel)
    stats = reduce(lambda acc, doc: acc.add(len(doc.queue)), documents, CollectionStats())
    logger.debug(f"Scanned {stats.doc_count} document(s) in {collection.name}, {stats.total_queued} queued")
    return stats
