"""
Pure mutation rules for a post's likes and comments.

Each function takes the current post and returns the new list to store,
leaving the input untouched. All membership, ownership and lookup rules
live here; the service only handles loading and versioned saving.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from .models import Post, Like, Comment
from .exceptions import (
    AlreadyLikedError,
    NotLikedError,
    CommentNotFoundError,
    NotAuthorizedError,
)


def _find_index(items: list, predicate) -> Optional[int]:
    """Position of the first item matching predicate, or None."""
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return None


def add_like(post: Post, user_id: str) -> list[Like]:
    """Prepend a like by user_id; a user may like a post once."""
    if any(like.user == user_id for like in post.likes):
        raise AlreadyLikedError(post.id, user_id)
    return [Like(id=str(uuid.uuid4()), user=user_id), *post.likes]


def remove_like(post: Post, user_id: str) -> list[Like]:
    """Remove the like left by user_id."""
    index = _find_index(post.likes, lambda like: like.user == user_id)
    if index is None:
        raise NotLikedError(post.id, user_id)
    return post.likes[:index] + post.likes[index + 1:]


def add_comment(
    post: Post,
    user_id: str,
    text: str,
    name: str,
    avatar: Optional[str],
) -> list[Comment]:
    """Prepend a comment carrying a snapshot of the author's name and avatar."""
    comment = Comment(
        id=str(uuid.uuid4()),
        user=user_id,
        text=text,
        name=name,
        avatar=avatar,
        date=datetime.now(timezone.utc),
    )
    return [comment, *post.comments]


def remove_comment(post: Post, comment_id: str, user_id: str) -> list[Comment]:
    """
    Remove comment_id if user_id wrote it.

    The entry is located by its own id; the author check happens on that
    same entry.
    """
    index = _find_index(post.comments, lambda comment: comment.id == comment_id)
    if index is None:
        raise CommentNotFoundError(post.id, comment_id)
    if post.comments[index].user != user_id:
        raise NotAuthorizedError(comment_id, user_id)
    return post.comments[:index] + post.comments[index + 1:]


def check_owner(post: Post, user_id: str) -> None:
    """Raise unless user_id is the post's author."""
    if post.user != user_id:
        raise NotAuthorizedError(post.id, user_id)
