"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from blog.application.usecase.comment import (
    ApproveCommentRequest,
    ApproveCommentUseCase,
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.service import IdentityService
from blog.domain.value import UserRef

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

bearer = HTTPBearer(auto_error=False)


def _token(
    auth_token: str | None, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Pick the caller's token: the auth cookie wins over a Bearer header."""
    if auth_token:
        return auth_token
    return credentials.credentials if credentials else None


def _require_user(
    identity_service: IdentityService,
    auth_token: str | None,
    credentials: HTTPAuthorizationCredentials | None,
    action: str,
) -> UserRef:
    user = identity_service.resolve(_token(auth_token, credentials))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user


class CommentContentAPIRequest(BaseModel):
    """API request carrying comment content.

    Length is checked after trimming by the comment service.
    """

    content: str


class ApproveCommentAPIRequest(BaseModel):
    """API request for changing a comment's approval."""

    is_approved: bool


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    identity_service: FromDishka[IdentityService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> GetCommentsResponse:
    """List a post's comment threads.

    Public endpoint. Signed-in callers also see their own pending comments;
    moderators see everything.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        identity_service: Caller resolution (injected)
        page: 1-based page number
        limit: Root comments per page
        auth_token: JWT token from cookie (optional)
        credentials: Bearer token (optional)

    Returns:
        One page of comment threads
    """
    viewer = identity_service.resolve(_token(auth_token, credentials))
    return await get_comments_use_case.execute(
        GetCommentsRequest(post_id=post_id, viewer=viewer, page=page, limit=limit)
    )


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CommentResponse:
    """Create a root comment on a published post.

    Requires authentication. The comment starts pending approval.
    """
    author = _require_user(identity_service, auth_token, credentials, "comment")
    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, content=request.content, author=author)
    )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: CommentContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CommentResponse:
    """Reply to a root comment.

    Requires authentication. Replies to replies are rejected with 409.
    """
    author = _require_user(identity_service, auth_token, credentials, "reply")
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            parent_id=comment_id, content=request.content, author=author
        )
    )


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: CommentContentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CommentResponse:
    """Edit a comment's content.

    Only the author or a moderator can edit.
    """
    editor = _require_user(
        identity_service, auth_token, credentials, "edit comments"
    )
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, editor=editor, content=request.content
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> DeleteCommentResponse:
    """Delete a comment; deleting a root also deletes its replies.

    Only the author or a moderator can delete.
    """
    requester = _require_user(
        identity_service, auth_token, credentials, "delete comments"
    )
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, requester=requester)
    )


@router.post("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> LikeCommentResponse:
    """Like an approved comment.

    Requires authentication.
    """
    _require_user(identity_service, auth_token, credentials, "like comments")
    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id)
    )


@router.put("/comments/{comment_id}/approval", response_model=CommentResponse)
async def approve_comment(
    comment_id: str,
    request: ApproveCommentAPIRequest,
    approve_comment_use_case: FromDishka[ApproveCommentUseCase],
    identity_service: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> CommentResponse:
    """Approve a comment or return it to pending.

    Moderators only.
    """
    moderator = _require_user(
        identity_service, auth_token, credentials, "moderate comments"
    )
    return await approve_comment_use_case.execute(
        ApproveCommentRequest(
            comment_id=comment_id,
            is_approved=request.is_approved,
            moderator=moderator,
        )
    )


@router.get("/comments", response_model=ListModerationQueueResponse)
async def list_moderation_queue(
    list_moderation_queue_use_case: FromDishka[ListModerationQueueUseCase],
    identity_service: FromDishka[IdentityService],
    approved: bool | None = Query(default=None),
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> ListModerationQueueResponse:
    """List comments of every post for review, newest first.

    Moderators only. ``approved=false`` gives the pending queue.
    """
    moderator = _require_user(
        identity_service, auth_token, credentials, "moderate comments"
    )
    return await list_moderation_queue_use_case.execute(
        ListModerationQueueRequest(
            moderator=moderator, approved=approved, page=page, limit=limit
        )
    )
