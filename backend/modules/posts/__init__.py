"""
Posts module.

The feed: posts with embedded likes and comments, and the ownership and
idempotency rules for changing them.

Public API:
- IPostService: Interface for post operations
- Post, Like, Comment: Data models
- Post exceptions: PostNotFoundError, AlreadyLikedError, etc.
"""

from .interfaces import IPostService
from .models import Post, Like, Comment, TextRequest
from .exceptions import (
    PostNotFoundError,
    CommentNotFoundError,
    NotAuthorizedError,
    AlreadyLikedError,
    NotLikedError,
)

__all__ = [
    # Interface
    "IPostService",
    # Models
    "Post",
    "Like",
    "Comment",
    "TextRequest",
    # Exceptions
    "PostNotFoundError",
    "CommentNotFoundError",
    "NotAuthorizedError",
    "AlreadyLikedError",
    "NotLikedError",
]
