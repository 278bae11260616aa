"""Shape of any document managed by the transaction layer."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

QUEUE_FIELD = "txn-queue"


class QueueDoc(BaseModel):
    """Only the pending-transaction queue is read; other fields are ignored.

    Queue entries are tokens of the form ``<txn id>_<nonce>``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    queue: list[str] = Field(default_factory=list, alias=QUEUE_FIELD)

    @field_validator("queue", mode="before")
    @classmethod
    def _null_queue_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def projection(cls) -> dict[str, int]:
        """Server-side projection fetching just the stored fields this model reads."""
        return {field.alias or name: 1 for name, field in cls.model_fields.items()}
