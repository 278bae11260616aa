"""Shape of documents in the ``txns.log`` collection."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LogDoc(BaseModel):
    """One entry per applied transaction, keyed by transaction id.

    Every other field is named after a collection the transaction touched and
    holds the affected document ids and revisions; those are kept as extra
    fields. The log is only counted.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
