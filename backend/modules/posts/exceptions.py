"""
Posts module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found.",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class CommentNotFoundError(NotFoundError):
    """Raised when a post has no comment with the given id."""

    def __init__(self, post_id: str, comment_id: str):
        super().__init__(
            "Comment does not exist.",
            code="COMMENT_NOT_FOUND",
            details={"post_id": post_id, "comment_id": comment_id},
        )


class NotAuthorizedError(AuthorizationError):
    """Raised when a user modifies a post or comment they do not own."""

    def __init__(self, resource_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="NOT_AUTHORIZED",
            details={"resource_id": resource_id, "user_id": user_id},
        )


class AlreadyLikedError(ConflictError):
    """Raised when a user likes a post they already liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "Post already liked!",
            code="ALREADY_LIKED",
            details={"post_id": post_id, "user_id": user_id},
        )


class NotLikedError(ValidationError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "Post has not yet been liked.",
            code="NOT_LIKED",
            details={"post_id": post_id, "user_id": user_id},
        )
