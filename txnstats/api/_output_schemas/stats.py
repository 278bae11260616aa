"""Output schemas for stats commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class StatsReportOutput(BaseOutputSchema):
    """Output schema for the stats report command."""
    database: str = Field(..., description="Name of the scanned database")
    report: dict[str, Any] | None = Field(..., description="Serialized report, null when the run failed")


register_output_schema("stats", "report", StatsReportOutput)
