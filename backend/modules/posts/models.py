"""
Posts module data models.

Likes and comments are embedded in their post and ordered most recent
first. Author name and avatar are copied onto posts and comments when they
are written, so reads never join against users.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Like(BaseModel):
    """A single like; at most one per user per post."""

    id: str = Field(..., description="Like ID")
    user: str = Field(..., description="ID of the user who liked the post")


class Comment(BaseModel):
    """A comment embedded in a post."""

    id: str = Field(..., description="Comment ID")
    user: str = Field(..., description="ID of the comment author")
    text: str = Field(..., description="Comment body")
    name: str = Field(..., description="Author name at time of writing")
    avatar: Optional[str] = Field(None, description="Author avatar at time of writing")
    date: datetime = Field(..., description="When the comment was written")


class Post(BaseModel):
    """A post with its likes and comments."""

    id: str = Field(..., description="Post ID")
    user: str = Field(..., description="ID of the post author")
    text: str = Field(..., description="Post body")
    name: str = Field(..., description="Author name at time of writing")
    avatar: Optional[str] = Field(None, description="Author avatar at time of writing")
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    date: datetime = Field(..., description="Creation time")
    version: int = Field(default=0, exclude=True, description="Optimistic concurrency version")


class TextRequest(BaseModel):
    """Request body carrying a required text field (posts and comments)."""

    text: str = Field(..., description="Body text")

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text is required")
        return value
