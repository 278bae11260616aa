"""Shape of documents in the transaction collection."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATE_FIELD = "s"
OPS_FIELD = "o"


class TxnDoc(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
    state: int = Field(default=0, alias=STATE_FIELD)
    ops: list[dict[str, Any]] = Field(default_factory=list, alias=OPS_FIELD)
    nonce: str | None = Field(default=None, alias="n")

    @field_validator("state", mode="before")
    @classmethod
    def _null_state_is_invalid(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("ops", mode="before")
    @classmethod
    def _null_ops_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v
