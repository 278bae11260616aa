"""Mock MongoDB backend using mongomock."""

from typing import Any

import mongomock

from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_AbstractBackend):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self.database_name = database_config.name
        self.address = "mongomock"
        self._client: mongomock.MongoClient | None = None

    def __enter__(self):
        self._client = _get_mongomock_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close shared client - it's reused across instances
        return False

    def list_collection_names(self) -> list[str]:
        return self._client[self.database_name].list_collection_names()  # type: ignore[index]

    def get_collection(self, collection_name: str) -> Any:
        return self._client[self.database_name][collection_name]  # type: ignore[index]
