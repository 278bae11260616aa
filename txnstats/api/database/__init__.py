"""Database access for txnstats (connection establishment, enumeration, cursors)."""

from .Database import Database
from .DatabaseConfig import DatabaseConfig
from .DatabaseConnectionError import DatabaseConnectionError

__all__ = ["Database", "DatabaseConfig", "DatabaseConnectionError"]
