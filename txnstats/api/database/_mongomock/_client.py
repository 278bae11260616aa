"""Process-wide mongomock server."""

import threading

import mongomock

# Every Database over the mongomock backend sees the same in-memory data
_shared_mongomock_client: mongomock.MongoClient | None = None
_lock = threading.Lock()


def _get_mongomock_client() -> mongomock.MongoClient:
    """Return the shared client, creating it on first use."""
    global _shared_mongomock_client
    with _lock:
        if _shared_mongomock_client is None:
            _shared_mongomock_client = mongomock.MongoClient()
        return _shared_mongomock_client
