"""
Posts module interface.

The API layer depends on IPostService for all feed operations.
"""

from typing import Protocol, runtime_checkable

from .models import Post, Like, Comment


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.

    Every mutation takes the acting user's id and enforces ownership and
    like idempotency itself.
    """

    async def create_post(self, user_id: str, text: str) -> Post:
        """
        Create a post, copying the author's name and avatar onto it.

        Raises:
            UserNotFoundError: If the author no longer exists
        """
        ...

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Get one post.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def delete_post(self, post_id: str, user_id: str) -> None:
        """
        Delete a post.

        Raises:
            PostNotFoundError: If the post doesn't exist
            NotAuthorizedError: If user_id is not the author
        """
        ...

    async def like_post(self, post_id: str, user_id: str) -> list[Like]:
        """
        Like a post and return its likes.

        Raises:
            PostNotFoundError: If the post doesn't exist
            AlreadyLikedError: If user_id already liked it
        """
        ...

    async def unlike_post(self, post_id: str, user_id: str) -> list[Like]:
        """
        Remove user_id's like and return the remaining likes.

        Raises:
            PostNotFoundError: If the post doesn't exist
            NotLikedError: If user_id has not liked it
        """
        ...

    async def add_comment(self, post_id: str, user_id: str, text: str) -> list[Comment]:
        """
        Comment on a post and return its comments.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> list[Comment]:
        """
        Delete a comment and return the remaining comments.

        Raises:
            PostNotFoundError: If the post doesn't exist
            CommentNotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user_id did not write the comment
        """
        ...

    async def delete_posts_by_user(self, user_id: str) -> None:
        """Delete every post written by user_id (account deletion)."""
        ...
