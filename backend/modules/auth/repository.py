"""
User repository for database access.

Encapsulates all Supabase queries against the users table. Reads used by
route-facing code go through the public column list, so the password hash
only leaves this module via get_record_by_email() for credential checks.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, UNIQUE_VIOLATION, is_valid_uuid
from .models import User, UserRecord
from .exceptions import DuplicateEmailError

PUBLIC_COLUMNS = "id, name, email, avatar, created_at"


class UserRepository(BaseRepository[User]):
    """Repository for user identity records."""

    table = "users"

    def create(self, name: str, email: str, password_hash: str, avatar: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the unique email constraint rejects the row.
        """
        data = {
            "name": name,
            "email": email,
            "password": password_hash,
            "avatar": avatar,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            result = self._db.table(self.table).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(email)
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by id, without the password hash."""
        if not is_valid_uuid(user_id):
            return None
        result = self._db.table(self.table).select(PUBLIC_COLUMNS).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, without the password hash."""
        result = self._db.table(self.table).select(PUBLIC_COLUMNS).eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_record_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by email including the password hash."""
        result = self._db.table(self.table).select("*").eq("email", email).execute()
        if not result.data:
            return None
        row = result.data[0]
        return UserRecord(password=row["password"], **self._map_to_user(row).model_dump())

    def delete(self, user_id: str) -> None:
        self._db.table(self.table).delete().eq("id", user_id).execute()

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            avatar=data.get("avatar"),
            date=data["created_at"],
        )
