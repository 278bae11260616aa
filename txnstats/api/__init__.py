"""txnstats API: configuration, database access and the stats engine."""
