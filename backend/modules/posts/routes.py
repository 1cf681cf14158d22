"""
Post API endpoints.

Every route here is private: the auth gate resolves the acting user from
the x-auth-token header. Domain errors propagate to the API error handlers.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_post_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IPostService
from .models import Post, Like, Comment, TextRequest

router = APIRouter()


@router.post("", response_model=Post)
async def create_post(
    request: TextRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """
    Create a post as the current user.
    """
    return await service.create_post(user.id, request.text)


@router.get("", response_model=list[Post])
async def list_posts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """
    List all posts, newest first.
    """
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.get_post(post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """
    Delete a post. Only its author may do this.
    """
    await service.delete_post(post_id, user.id)
    return MessageResponse(msg="Post removed")


@router.put("/like/{post_id}", response_model=list[Like])
async def like_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.like_post(post_id, user.id)


@router.put("/unlike/{post_id}", response_model=list[Like])
async def unlike_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.unlike_post(post_id, user.id)


@router.post("/comments/{post_id}", response_model=list[Comment])
async def add_comment(
    post_id: str,
    request: TextRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    """
    Comment on a post; returns the post's comments.
    """
    return await service.add_comment(post_id, user.id, request.text)


@router.delete("/comments/{post_id}/{comment_id}", response_model=list[Comment])
async def delete_comment(
    post_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    """
    Delete one of your own comments; returns the remaining comments.
    """
    return await service.delete_comment(post_id, comment_id, user.id)
