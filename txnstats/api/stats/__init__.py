"""Stats API: scanners, the aggregation engine and the report model."""

from .aggregate_stats import aggregate_stats
from .CollectionStats import CollectionStats
from .InProgressStats import InProgressStats
from .LogStats import LogStats
from .ScanError import ScanCancelled, ScanError
from .StatsReport import StatsReport
from .TransactionState import TransactionState, UnknownState, classify

__all__ = [
    "CollectionStats",
    "InProgressStats",
    "LogStats",
    "ScanCancelled",
    "ScanError",
    "StatsReport",
    "TransactionState",
    "UnknownState",
    "aggregate_stats",
    "classify",
]
