"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the versioned-write primitive used for
read-modify-write sequences on JSON sub-lists.
"""

import uuid
from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")

# Postgres error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


def is_valid_uuid(value: str) -> bool:
    """Return True if value parses as a UUID (row ids are uuid columns)."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - update_versioned() for optimistic concurrency

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            table = "posts"

            def get_by_id(self, post_id: str) -> Optional[Post]:
                result = self._db.table(self.table).select("*").eq("id", post_id).execute()
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def update_versioned(
        self,
        row_id: str,
        expected_version: int,
        data: dict[str, Any],
    ) -> Optional[dict[str, Any]]:
        """
        Write data only if the row still has expected_version.

        The version is bumped as part of the same UPDATE, so two writers
        that read the same version cannot both succeed.

        Args:
            row_id: Primary key of the row.
            expected_version: Version observed when the row was read.
            data: Columns to write.

        Returns:
            The updated row, or None if another writer got there first
            (or the row no longer exists).
        """
        payload = {**data, "version": expected_version + 1}
        result = (
            self._db.table(self.table)
            .update(payload)
            .eq("id", row_id)
            .eq("version", expected_version)
            .execute()
        )
        if not result.data:
            return None
        return result.data[0]
