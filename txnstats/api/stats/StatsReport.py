"""The merged report of one txnstats run."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .CollectionStats import CollectionStats
from .InProgressStats import InProgressStats
from .LogStats import LogStats


@dataclass(frozen=True)
class StatsReport:
    """Per-collection queue stats (non-empty queues only), txn histogram and log size.

    Serialized with the field names operators and scripts already rely on:
    ``Collections``, ``InProgress`` and ``Log``.
    """

    collections: Mapping[str, CollectionStats] = field(default_factory=lambda: MappingProxyType({}))
    in_progress: InProgressStats = field(default_factory=InProgressStats)
    log: LogStats = field(default_factory=LogStats)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Collections": {name: self.collections[name].to_dict() for name in sorted(self.collections)},
            "InProgress": self.in_progress.to_dict(),
            "Log": self.log.to_dict(),
        }
