"""Abstract base class for database backend implementations."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractBackend(ABC):
    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    def list_collection_names(self) -> list[str]:
        pass

    @abstractmethod
    def get_collection(self, collection_name: str) -> Any:
        """Return a collection handle.

        Handles from the same backend share one client, so they may be
        iterated concurrently from several threads.
        """
        pass
