"""Mock MongoDB-specific configuration data for testing."""

from pydantic import BaseModel


class _Data(BaseModel):
    """MongoMock configuration data.

    Note: MongoMock doesn't require a host since it's an in-memory database.
    The implementation hands out a shared client without connection parameters.
    """

    model_config = {"extra": "forbid"}
