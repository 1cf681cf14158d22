"""
Post repository for database access.

Encapsulates all Supabase queries and data mapping for the posts table.
Likes and comments are JSON arrays on the post row and are always written
through update_versioned().

Note: This repository does NOT perform authorization checks.
The service layer is responsible for verifying user ownership.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel

from shared.repository import BaseRepository, is_valid_uuid
from .models import Post, Like, Comment


class PostRepository(BaseRepository[Post]):
    """Repository for posts and their embedded likes and comments."""

    table = "posts"

    def create(self, user_id: str, text: str, name: str, avatar: Optional[str]) -> Post:
        data = {
            "user_id": user_id,
            "text": text,
            "name": name,
            "avatar": avatar,
            "likes": [],
            "comments": [],
            "version": 0,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_post(result.data[0])

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """Get a post by id; malformed ids are treated as missing."""
        if not is_valid_uuid(post_id):
            return None
        result = self._db.table(self.table).select("*").eq("id", post_id).execute()
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def list_all(self) -> list[Post]:
        """All posts, newest first."""
        result = self._db.table(self.table).select("*").order("created_at", desc=True).execute()
        return [self._map_to_post(row) for row in result.data]

    def update_items(
        self,
        post: Post,
        field: str,
        items: list[BaseModel],
    ) -> Optional[Post]:
        """
        Replace the likes or comments array if the post is still at post.version.

        Returns:
            The updated post, or None if a concurrent write won.
        """
        row = self.update_versioned(
            post.id,
            post.version,
            {field: [item.model_dump(mode="json") for item in items]},
        )
        if row is None:
            return None
        return self._map_to_post(row)

    def delete(self, post_id: str) -> None:
        self._db.table(self.table).delete().eq("id", post_id).execute()

    def delete_by_user(self, user_id: str) -> None:
        """Delete every post written by user_id."""
        self._db.table(self.table).delete().eq("user_id", user_id).execute()

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model."""
        return Post(
            id=str(data["id"]),
            user=str(data["user_id"]),
            text=data["text"],
            name=data["name"],
            avatar=data.get("avatar"),
            likes=[Like(**like) for like in data.get("likes") or []],
            comments=[Comment(**comment) for comment in data.get("comments") or []],
            date=data["created_at"],
            version=data.get("version", 0),
        )
