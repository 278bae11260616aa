"""Shape of documents in the ``txns.stash`` collection."""

from typing import Any

from pydantic import Field

from .QueueDoc import QueueDoc


class StashDoc(QueueDoc):
    """Stash entries hold documents being inserted or removed by a transaction.

    The queue is compatible with ``QueueDoc``. The revision and the
    insert/remove markers are fetched too, so a stash entry with a
    malformed revision fails the scan instead of being counted.
    """

    revno: int = Field(default=0, alias="txn-revno")
    insert: Any = Field(default=None, alias="txn-insert")
    remove: Any = Field(default=None, alias="txn-remove")
