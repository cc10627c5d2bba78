"""Domain value objects for the blog comment core."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.types import ModerationState, PostStatus, UserRef

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "PostStatus",
    "ModerationState",
    "UserRef",
]
