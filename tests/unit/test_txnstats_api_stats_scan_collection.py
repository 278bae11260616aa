"""Unit tests for txnstats.api.stats.scan_collection module."""

import threading

import bson.errors
import pytest

from tests.conftest import FailingCollection, seed_queues
from txnstats.api.stats.CollectionStats import CollectionStats
from txnstats.api.stats.QueueDoc import QueueDoc
from txnstats.api.stats.scan_collection import scan_collection
from txnstats.api.stats.ScanError import ScanCancelled, ScanError
from txnstats.api.stats.StashDoc import StashDoc

pytestmark = pytest.mark.stats


def test_scan_reduces_queue_lengths(mock_db):
    seed_queues(mock_db, "charms", [0, 2, 1])
    stats = scan_collection(mock_db["charms"], batch_size=2)
    assert stats == CollectionStats(doc_count=3, max_queued=2, min_queued=0, total_queued=3)


def test_scan_empty_collection(mock_db):
    seed_queues(mock_db, "units", [])
    assert scan_collection(mock_db["units"]) == CollectionStats()


def test_documents_without_queue_count_as_zero(mock_db):
    mock_db["settings"].insert_many([{"_id": "a", "value": 1}, {"_id": "b", "txn-queue": ["t_n"]}])
    stats = scan_collection(mock_db["settings"])
    assert stats.doc_count == 2
    assert stats.min_queued == 0
    assert stats.max_queued == 1
    assert stats.total_queued == 1


def test_scan_many_documents_across_batches(mock_db):
    lengths = [i % 5 for i in range(57)]
    seed_queues(mock_db, "machines", lengths)
    stats = scan_collection(mock_db["machines"], batch_size=10)
    assert stats.doc_count == 57
    assert stats.total_queued == sum(lengths)
    assert stats.max_queued == 4
    assert stats.min_queued == 0


def test_scan_stash_documents(mock_db):
    mock_db["txns.stash"].insert_many(
        [
            {"_id": {"c": "units", "id": "u/0"}, "txn-queue": ["a_n", "b_n"], "txn-revno": 1},
            {"_id": {"c": "units", "id": "u/1"}, "txn-queue": [], "txn-remove": "b"},
        ]
    )
    stats = scan_collection(mock_db["txns.stash"], model=StashDoc)
    assert stats.doc_count == 2
    assert stats.total_queued == 2


def test_stash_scan_fetches_stash_fields(mock_db):
    mock_db["txns.stash"].insert_one({"_id": {"c": "units", "id": "u/0"}, "txn-queue": ["a_n"], "txn-revno": 4})
    wrapped = FailingCollection(mock_db["txns.stash"], fail_after=100)
    scan_collection(wrapped, model=StashDoc)
    assert wrapped.projections == [{"txn-queue": 1, "txn-revno": 1, "txn-insert": 1, "txn-remove": 1}]


def test_queue_scan_fetches_only_the_queue(mock_db):
    seed_queues(mock_db, "charms", [1])
    wrapped = FailingCollection(mock_db["charms"], fail_after=100)
    scan_collection(wrapped, model=QueueDoc)
    assert wrapped.projections == [{"txn-queue": 1}]


def test_malformed_stash_revision_is_scan_error(mock_db):
    mock_db["txns.stash"].insert_one({"_id": {"c": "units", "id": "u/0"}, "txn-queue": [], "txn-revno": "seven"})
    with pytest.raises(ScanError, match="decode document in collection 'txns.stash'"):
        scan_collection(mock_db["txns.stash"], model=StashDoc)
    # A plain queue scan does not look at the revision
    assert scan_collection(mock_db["txns.stash"]).doc_count == 1


def test_batch_size_is_passed_to_cursor(mock_db):
    seed_queues(mock_db, "charms", [1, 1])
    wrapped = FailingCollection(mock_db["charms"], fail_after=100)
    scan_collection(wrapped, batch_size=1000)
    assert wrapped.cursors[0].batch == 1000
    assert wrapped.cursors[0].closed


def test_cursor_failure_names_collection(mock_db):
    seed_queues(mock_db, "foo", [1, 2, 3])
    wrapped = FailingCollection(mock_db["foo"], fail_after=2)
    with pytest.raises(ScanError) as exc_info:
        scan_collection(wrapped)
    assert exc_info.value.collection == "foo"
    assert "'foo'" in str(exc_info.value)
    assert "connection reset by peer" in str(exc_info.value)
    assert exc_info.value.__cause__ is wrapped.error
    assert wrapped.cursors[0].closed


def test_undecodable_document_is_scan_error(mock_db):
    mock_db["charms"].insert_one({"_id": "bad", "txn-queue": "not-a-list"})
    with pytest.raises(ScanError, match="decode document in collection 'charms'"):
        scan_collection(mock_db["charms"])


def test_invalid_bson_is_scan_error(mock_db):
    seed_queues(mock_db, "foo", [1, 2])
    wrapped = FailingCollection(mock_db["foo"], fail_after=1, error=bson.errors.InvalidBSON("invalid utf-8"))
    with pytest.raises(ScanError) as exc_info:
        scan_collection(wrapped)
    assert exc_info.value.collection == "foo"
    assert exc_info.value.operation == "decode document in collection"
    assert "invalid utf-8" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, bson.errors.InvalidBSON)
    assert wrapped.cursors[0].closed


def test_cancelled_scan_stops(mock_db):
    seed_queues(mock_db, "charms", [1, 2])
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(ScanCancelled):
        scan_collection(mock_db["charms"], cancel=cancel)


def test_unset_cancel_event_does_not_interfere(mock_db):
    seed_queues(mock_db, "charms", [1, 2])
    stats = scan_collection(mock_db["charms"], cancel=threading.Event())
    assert stats.total_queued == 3
