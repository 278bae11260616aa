"""Lifecycle states of a multi-document transaction."""

from dataclasses import dataclass
from enum import Enum


class TransactionState(Enum):
    """Named states stored in the ``s`` field of a transaction document."""

    INVALID = 0
    PREPARING = 1  # One or more documents not prepared
    PREPARED = 2  # Prepared but not yet ready to run
    ABORTING = 3  # Assertions failed, cleaning up
    APPLYING = 4  # Changes are in progress
    ABORTED = 5  # Pre-conditions failed, nothing done
    APPLIED = 6  # All changes applied

    @property
    def code(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class UnknownState:
    """A state code this tool does not recognise, kept with its raw value."""

    code: int

    @property
    def label(self) -> str:
        return f"unknown state: {self.code}"

    def __str__(self) -> str:
        return self.label


State = TransactionState | UnknownState


def classify(code: int) -> State:
    """Map a stored state code to its lifecycle state.

    Total: codes outside the named set become ``UnknownState(code)``.
    """
    try:
        return TransactionState(code)
    except ValueError:
        return UnknownState(code)
