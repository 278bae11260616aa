"""Size of the transaction log."""

from dataclasses import dataclass

from ._omit_zero import _omit_zero


@dataclass(frozen=True)
class LogStats:
    doc_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return _omit_zero({"DocCount": self.doc_count})
