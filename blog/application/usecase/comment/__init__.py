"""Comment use cases."""

from .approve_comment import ApproveCommentRequest, ApproveCommentUseCase
from .common import CommentItem, CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentThreadItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .list_moderation_queue import (
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "ApproveCommentRequest",
    "ApproveCommentUseCase",
    "CommentItem",
    "CommentResponse",
    "CommentThreadItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "ListModerationQueueRequest",
    "ListModerationQueueResponse",
    "ListModerationQueueUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
