"""Database public API."""

import importlib
from typing import Any

from ...mongo_retry import mongo_retry
from ._AbstractBackend import _AbstractBackend
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig


class Database:
    """Public API for the database holding the transaction collections.

    Use as a context manager; the connection is established on entry and
    closed on exit. Collection handles obtained inside the block share the
    underlying client and may be used from several threads at once.
    """

    def __init__(self, database_config: DatabaseConfig, retry_attempts: int = 3):
        self.database_config = database_config
        self.name = database_config.name
        self.retry_attempts = retry_attempts
        self._impl: _AbstractBackend | None = None

    def __enter__(self):
        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = importlib.import_module(f"txnstats.api.database._{backend_type}._Impl")
        impl = module._Impl(self.database_config)
        impl.__enter__()
        self._impl = impl
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            impl, self._impl = self._impl, None
            return impl.__exit__(exc_type, exc_val, exc_tb)
        return False

    @property
    def address(self) -> str:
        return getattr(self._require_impl(), "address", "")

    def list_collection_names(self) -> list[str]:
        """List collection names in the database (unsorted).

        Transient connection failures are retried; listing is idempotent.
        """
        impl = self._require_impl()
        return mongo_retry(max_attempts=self.retry_attempts)(impl.list_collection_names)()

    def collection(self, collection_name: str) -> Any:
        """Get a collection handle by name."""
        return self._require_impl().get_collection(collection_name)

    def _require_impl(self) -> _AbstractBackend:
        if not self._impl:
            raise RuntimeError("Database not initialized. Use as context manager first.")
        return self._impl
