from ...constants import SYSTEM_COLLECTION_PREFIX, TXNS_COLLECTION


def want_collection_stats(collection_name: str, txns_collection: str = TXNS_COLLECTION) -> bool:
    """Whether a collection gets a queue scan.

    The transaction collection has its own scan and server-owned
    ``system.*`` collections never carry queues.
    """
    return collection_name != txns_collection and not collection_name.startswith(SYSTEM_COLLECTION_PREFIX)
