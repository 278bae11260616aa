"""Database connection error."""


class DatabaseConnectionError(Exception):
    """Raised when dialing, authenticating or handshaking with the server fails."""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"cannot dial mongodb at {address}: {reason}")
