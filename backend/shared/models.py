"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from the token's `user` claim by the auth gate and made
    available to route handlers via dependency injection. The token only
    carries the user id; anything else is loaded from the store on demand.
    """

    id: str = Field(..., description="User ID")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. {"msg": "Post removed"}."""

    msg: str
