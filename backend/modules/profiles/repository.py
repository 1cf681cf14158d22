"""
Profile repository for database access.

Encapsulates all Supabase queries and data mapping for the profiles table.
Reads embed the owning user's name and avatar through the user_id foreign
key. Writes go through update_versioned(); the unique user_id constraint
guarantees one profile per user.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, UNIQUE_VIOLATION, is_valid_uuid
from .models import Profile, ProfileUser, Experience, Education

PROFILE_SELECT = "*, user:users(id, name, avatar)"


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profiles and their embedded experience/education."""

    table = "profiles"

    def get_by_user(self, user_id: str) -> Optional[Profile]:
        """Get the profile owned by user_id; malformed ids are treated as missing."""
        if not is_valid_uuid(user_id):
            return None
        result = self._db.table(self.table).select(PROFILE_SELECT).eq("user_id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def list_all(self) -> list[Profile]:
        result = self._db.table(self.table).select(PROFILE_SELECT).execute()
        return [self._map_to_profile(row) for row in result.data]

    def create(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        """
        Insert a profile for user_id.

        Returns:
            The created profile, or None if a profile for user_id was
            inserted concurrently.
        """
        row = {
            **data,
            "user_id": user_id,
            "experience": [],
            "education": [],
            "version": 0,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self._db.table(self.table).insert(row).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                return None
            raise
        return self.get_by_user(user_id)

    def update(self, profile: Profile, data: dict[str, Any]) -> Optional[Profile]:
        """
        Write data if the profile is still at profile.version.

        Returns:
            The updated profile, or None if a concurrent write won.
        """
        row = self.update_versioned(profile.id, profile.version, data)
        if row is None:
            return None
        return self._map_to_profile(row, user=profile.user)

    def delete_by_user(self, user_id: str) -> None:
        self._db.table(self.table).delete().eq("user_id", user_id).execute()

    def _map_to_profile(self, data: dict[str, Any], user: Optional[ProfileUser] = None) -> Profile:
        """Map database row to Profile model. Update responses carry no join, so user can be passed in."""
        joined = data.get("user")
        if joined:
            user = ProfileUser(id=str(joined["id"]), name=joined.get("name"), avatar=joined.get("avatar"))
        elif user is None:
            user = ProfileUser(id=str(data["user_id"]))

        return Profile(
            id=str(data["id"]),
            user=user,
            company=data.get("company"),
            website=data.get("website"),
            location=data.get("location"),
            status=data.get("status"),
            skills=data.get("skills") or [],
            bio=data.get("bio"),
            githubusername=data.get("githubusername"),
            social=data.get("social") or {},
            experience=[Experience(**entry) for entry in data.get("experience") or []],
            education=[Education(**entry) for entry in data.get("education") or []],
            date=data["created_at"],
            version=data.get("version", 0),
        )
