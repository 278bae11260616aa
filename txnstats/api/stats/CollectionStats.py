"""Queue depth statistics for one collection."""

from dataclasses import dataclass

from ._omit_zero import _omit_zero


@dataclass(frozen=True)
class CollectionStats:
    """Extrema and total of ``txn-queue`` lengths over a collection.

    All fields are zero for an empty collection. Otherwise
    ``min_queued <= max_queued`` and ``total_queued`` is the sum of the
    queue lengths of all ``doc_count`` documents.
    """

    doc_count: int = 0
    max_queued: int = 0
    min_queued: int = 0
    total_queued: int = 0

    def add(self, queue_length: int) -> "CollectionStats":
        """Return the stats with one more document folded in."""
        if self.doc_count == 0:
            return CollectionStats(
                doc_count=1,
                max_queued=queue_length,
                min_queued=queue_length,
                total_queued=queue_length,
            )
        return CollectionStats(
            doc_count=self.doc_count + 1,
            max_queued=max(self.max_queued, queue_length),
            min_queued=min(self.min_queued, queue_length),
            total_queued=self.total_queued + queue_length,
        )

    def to_dict(self) -> dict[str, int]:
        return _omit_zero(
            {
                "DocCount": self.doc_count,
                "MaxQueued": self.max_queued,
                "MinQueued": self.min_queued,
                "TotalQueued": self.total_queued,
            }
        )
