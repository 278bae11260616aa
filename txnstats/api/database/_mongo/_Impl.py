"""MongoDB backend implementation."""

from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ....logging_config import get_logger
from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ..DatabaseConnectionError import DatabaseConnectionError
from ._Data import _Data

logger = get_logger("database.mongo")


class _Impl(_AbstractBackend):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoDB config data is required")
        self.data = database_config.data
        self.database_name = database_config.name
        self.address = self.data.address
        self._client: MongoClient[Any] | None = None

    def client_options(self) -> dict[str, Any]:
        """Keyword arguments handed to MongoClient."""
        options: dict[str, Any] = {
            "host": self.data.hostname,
            "port": self.data.port,
            "serverSelectionTimeoutMS": self.data.timeout_ms,
            "appname": "txnstats",
        }
        if self.data.username:
            options["username"] = self.data.username
            options["password"] = self.data.password
            options["authSource"] = "admin"
        if self.data.ssl:
            # The operator's network is trusted; the server certificate is not checked.
            options["tls"] = True
            options["tlsAllowInvalidCertificates"] = True
            options["tlsAllowInvalidHostnames"] = True
        return options

    def __enter__(self):
        logger.info(f"Dialing mongodb at {self.address} (tls={self.data.ssl})")
        try:
            self._client = MongoClient(**self.client_options())
            self._client.server_info()  # Test connection and credentials
        except PyMongoError as e:
            if self._client is not None:
                self._client.close()
                self._client = None
            raise DatabaseConnectionError(self.address, str(e)) from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        return False

    def list_collection_names(self) -> list[str]:
        if self._client is None:
            raise RuntimeError("Mongo client not initialized")
        return self._client[self.database_name].list_collection_names()

    def get_collection(self, collection_name: str) -> Any:
        if self._client is None:
            raise RuntimeError("Mongo client not initialized")
        return self._client[self.database_name][collection_name]
