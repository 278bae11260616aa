"""txnstats - point-in-time health report for mgo/txn bookkeeping collections."""

__version__ = "0.3.0"
