"""Retry logic for idempotent MongoDB metadata reads.

Only listing the collections of the database is retried; it is a whole,
repeatable read. Cursor iteration and the log count are not retried.
"""

import time
from functools import wraps
from typing import Callable, TypeVar

import pymongo.errors

from .logging_config import get_logger

logger = get_logger("mongo_retry")

T = TypeVar('T')

TRANSIENT_ERRORS: tuple = (
    pymongo.errors.AutoReconnect,
    pymongo.errors.ServerSelectionTimeoutError,
)


def mongo_retry(
    max_attempts: int = 3,
    delay_secs: float = 0.5,
    backoff_multiplier: float = 2.0,
    exceptions: tuple = TRANSIENT_ERRORS,
):
    """
    Decorator to retry a MongoDB read on transient failures.

    Args:
        max_attempts: Maximum number of attempts (1 disables retrying)
        delay_secs: Initial delay between attempts in seconds
        backoff_multiplier: Multiplier for exponential backoff
        exceptions: Tuple of exception types to retry on

    Example:
        @mongo_retry(max_attempts=3, delay_secs=0.5)
        def list_names(db):
            return db.list_collection_names()
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1 (found: {max_attempts})")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            current_delay = delay_secs
            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions:
                    if attempt >= max_attempts:
                        logger.error(
                            f"MongoDB read failed after {max_attempts} attempt(s): {func.__name__}",
                            extra={"operation": func.__name__, "attempts": attempt},
                        )
                        raise
                    logger.warning(
                        f"MongoDB read failed (attempt {attempt}/{max_attempts}): {func.__name__}. "
                        f"Retrying in {current_delay}s...",
                        extra={"operation": func.__name__, "attempt": attempt, "delay": current_delay},
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff_multiplier
            raise RuntimeError(f"Unexpected exit from retry loop: {func.__name__}")

        return wrapper

    return decorator
