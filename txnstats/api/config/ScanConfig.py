"""Scan tuning configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_BATCH_SIZE, DEFAULT_CONCURRENCY, TXNS_COLLECTION


class ScanConfig(BaseModel):
    """How the bookkeeping collections are scanned."""

    model_config = ConfigDict(extra="forbid")

    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1, description="Maximum scans in flight at once")
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1, description="Cursor batch size")
    txns_collection: str = Field(default=TXNS_COLLECTION, min_length=1, description="Transaction collection name")
    retry_attempts: int = Field(default=3, ge=1, description="Attempts for idempotent metadata reads")
