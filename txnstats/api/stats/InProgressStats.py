"""State histogram of the transaction collection."""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ._omit_zero import _omit_zero
from .TransactionState import State, TransactionState


def _empty_states() -> Mapping[State, int]:
    return MappingProxyType({state: 0 for state in TransactionState})


@dataclass(frozen=True)
class InProgressStats:
    """Histogram over transaction states plus operation-count extrema.

    ``states`` always holds every named state; unrecognised codes are added
    as they are seen. ``sum(states.values()) == total_txns``.
    """

    states: Mapping[State, int] = field(default_factory=_empty_states)
    max_ops: int = 0
    total_ops: int = 0
    total_txns: int = 0

    @classmethod
    def from_transactions(cls, transactions: Iterable[tuple[State, int]]) -> "InProgressStats":
        """Fold (state, op count) pairs, one per transaction, into the histogram."""
        states: Counter[State] = Counter(dict.fromkeys(TransactionState, 0))
        max_ops = total_ops = total_txns = 0
        for state, op_count in transactions:
            states[state] += 1
            max_ops = max(max_ops, op_count)
            total_ops += op_count
            total_txns += 1
        return cls(
            states=MappingProxyType(dict(states)),
            max_ops=max_ops,
            total_ops=total_ops,
            total_txns=total_txns,
        )

    def ordered_states(self) -> list[tuple[State, int]]:
        """Named states in code order, then unknown codes ascending."""
        return sorted(self.states.items(), key=lambda item: (not isinstance(item[0], TransactionState), item[0].code))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"States": {state.label: count for state, count in self.ordered_states()}}
        result.update(
            _omit_zero(
                {
                    "MaxOps": self.max_ops,
                    "TotalOps": self.total_ops,
                    "TotalTxns": self.total_txns,
                }
            )
        )
        return result
