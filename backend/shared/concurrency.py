"""
Retry loop for optimistic-concurrency writes.

A write attempt re-reads the row, re-applies the mutation and tries a
versioned update. Returning None means the version moved underneath it.
"""

import logging
from typing import Callable, Optional, TypeVar

from .exceptions import ConcurrentUpdateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_versioned(
    attempt: Callable[[], Optional[T]],
    resource: str,
    resource_id: str,
    max_attempts: int = 3,
) -> T:
    """
    Call attempt until it returns a value or max_attempts is reached.

    Args:
        attempt: Performs one read-mutate-write cycle. Domain errors raised
            inside it propagate immediately and are not retried.
        resource: Resource name used in logs and the final error.
        resource_id: Identifier of the row being written.
        max_attempts: Upper bound on write attempts.

    Raises:
        ConcurrentUpdateError: If every attempt lost to a concurrent writer.
    """
    for attempt_number in range(1, max_attempts + 1):
        result = attempt()
        if result is not None:
            return result
        logger.debug(
            f"Version conflict on {resource} {resource_id} "
            f"(attempt {attempt_number}/{max_attempts})"
        )
    raise ConcurrentUpdateError(resource, resource_id, max_attempts)
