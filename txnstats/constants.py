"""Shared constants for txnstats."""

TXNSTATS_HOME_EXT = ".txnstats"  # user-level config directory suffix

# Collections maintained by the transaction layer
TXNS_COLLECTION = "txns"

# Collections with this prefix are owned by the server
SYSTEM_COLLECTION_PREFIX = "system."

DEFAULT_DATABASE_NAME = "juju"
DEFAULT_HOSTNAME = "localhost"
DEFAULT_PORT = 37017
DEFAULT_USERNAME = "admin"

# Cursor batch size; bounds client memory regardless of collection size
DEFAULT_BATCH_SIZE = 1000

# Maximum number of scans in flight at once
DEFAULT_CONCURRENCY = 10

DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000
