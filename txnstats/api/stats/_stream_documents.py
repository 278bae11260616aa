"""Decode a collection lazily through a batched server-side cursor."""

import threading
from collections.abc import Iterator
from typing import Any, TypeVar

from bson.errors import BSONError
from pydantic import BaseModel, ValidationError
from pymongo.errors import PyMongoError

from .ScanError import ScanCancelled, ScanError

M = TypeVar("M", bound=BaseModel)


def _stream_documents(
    collection: Any,
    projection: dict[str, int],
    model: type[M],
    batch_size: int,
    cancel: threading.Event | None = None,
) -> Iterator[M]:
    """Yield each document of ``collection`` decoded as ``model``.

    The sequence is finite and cannot be restarted. Driver failures and
    documents that are not valid BSON or do not fit ``model`` surface as
    ``ScanError``; a set ``cancel`` event stops the stream with
    ``ScanCancelled`` before the next document is decoded.
    """
    name = collection.name
    cursor = None
    try:
        cursor = collection.find({}, projection).batch_size(batch_size)
        for raw in cursor:
            if cancel is not None and cancel.is_set():
                raise ScanCancelled(name)
            yield model.model_validate(raw)
    except PyMongoError as e:
        raise ScanError(name, "iterate over collection", str(e)) from e
    except (BSONError, ValidationError) as e:
        raise ScanError(name, "decode document in collection", str(e)) from e
    finally:
        if cursor is not None:
            cursor.close()
