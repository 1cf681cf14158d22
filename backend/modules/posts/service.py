"""
Posts service implementation.

Loads a post, applies one of the pure rules from mutations.py and writes
the result back with a versioned update, retrying when a concurrent
request changed the post in between.
"""

import logging
from typing import Callable

from pydantic import BaseModel

from shared.concurrency import run_versioned

from . import mutations
from .interfaces import IPostService
from .models import Post, Like, Comment
from .repository import PostRepository
from .exceptions import PostNotFoundError

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """
    Post service with Supabase backend.

    Implements IPostService protocol with real database operations.
    """

    def __init__(
        self,
        repository: PostRepository,
        auth,  # IAuthService - injected, for author snapshots
        max_attempts: int = 3,
    ):
        self._posts = repository
        self._auth = auth
        self._max_attempts = max_attempts

    async def create_post(self, user_id: str, text: str) -> Post:
        author = await self._auth.get_user_by_id(user_id)
        post = self._posts.create(user_id, text, author.name, author.avatar)
        logger.info(f"User {user_id} created post {post.id}")
        return post

    async def list_posts(self) -> list[Post]:
        return self._posts.list_all()

    async def get_post(self, post_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def delete_post(self, post_id: str, user_id: str) -> None:
        post = await self.get_post(post_id)
        mutations.check_owner(post, user_id)
        self._posts.delete(post_id)
        logger.info(f"User {user_id} deleted post {post_id}")

    async def like_post(self, post_id: str, user_id: str) -> list[Like]:
        post = self._mutate(post_id, "likes", lambda p: mutations.add_like(p, user_id))
        return post.likes

    async def unlike_post(self, post_id: str, user_id: str) -> list[Like]:
        post = self._mutate(post_id, "likes", lambda p: mutations.remove_like(p, user_id))
        return post.likes

    async def add_comment(self, post_id: str, user_id: str, text: str) -> list[Comment]:
        author = await self._auth.get_user_by_id(user_id)
        post = self._mutate(
            post_id,
            "comments",
            lambda p: mutations.add_comment(p, user_id, text, author.name, author.avatar),
        )
        return post.comments

    async def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> list[Comment]:
        post = self._mutate(
            post_id,
            "comments",
            lambda p: mutations.remove_comment(p, comment_id, user_id),
        )
        return post.comments

    async def delete_posts_by_user(self, user_id: str) -> None:
        self._posts.delete_by_user(user_id)

    def _mutate(
        self,
        post_id: str,
        field: str,
        mutate: Callable[[Post], list[BaseModel]],
    ) -> Post:
        """Read-mutate-write one of the post's lists under optimistic concurrency."""

        def attempt():
            post = self._posts.get_by_id(post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            return self._posts.update_items(post, field, mutate(post))

        return run_versioned(attempt, "post", post_id, self._max_attempts)
