"""Top-level txnstats configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..database.DatabaseConfig import DatabaseConfig
from .ScanConfig import ScanConfig


class StatsConfig(BaseModel):
    """Everything a stats run needs: where to connect and how to scan."""

    model_config = ConfigDict(extra="forbid")

    database: DatabaseConfig
    scan: ScanConfig = Field(default_factory=ScanConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization (password redacted)."""
        database = self.database.model_dump()
        if database["data"].get("password"):
            database["data"]["password"] = "***"
        return {
            "database": database,
            "scan": self.scan.model_dump(),
        }
