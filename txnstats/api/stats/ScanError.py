"""Errors raised while scanning a collection."""


class ScanError(Exception):
    """A cursor, count or listing operation failed mid-run.

    The driver error is chained as ``__cause__``.
    """

    def __init__(self, collection: str, operation: str, reason: str):
        self.collection = collection
        self.operation = operation
        self.reason = reason
        super().__init__(f"cannot {operation} {collection!r}: {reason}")


class ScanCancelled(ScanError):
    """The scan stopped early because a sibling scan failed."""

    def __init__(self, collection: str):
        super().__init__(collection, "iterate over collection", "scan cancelled")
