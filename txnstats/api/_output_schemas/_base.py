"""Fields every command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Errors and warnings of a command run.

    A failed scan or connection puts its message in ``errors``; unknown keys
    are rejected so a misspelled output field fails validation.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Messages of the failure that ended the run")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal conditions noticed during the run")
