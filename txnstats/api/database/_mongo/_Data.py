"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, model_validator

from ....constants import (
    DEFAULT_HOSTNAME,
    DEFAULT_PORT,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    DEFAULT_USERNAME,
)


class _Data(BaseModel):
    hostname: str = Field(default=DEFAULT_HOSTNAME, min_length=1, description="Hostname of the MongoDB server")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Port of the MongoDB server")
    ssl: bool = Field(default=True, description="Use TLS (certificates are not verified)")
    username: str = Field(default=DEFAULT_USERNAME, description="User name; empty disables authentication")
    password: str = Field(default="", description="Password, required when username is set")
    timeout_ms: int = Field(
        default=DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        gt=0,
        description="Server selection timeout in milliseconds",
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_credentials(self) -> "_Data":
        if self.username and not self.password:
            raise ValueError(
                f"password must be provided if username is provided (found: username={self.username!r}, no password)"
            )
        return self

    @property
    def address(self) -> str:
        if ":" in self.hostname:
            return f"[{self.hostname}]:{self.port}"
        return f"{self.hostname}:{self.port}"
