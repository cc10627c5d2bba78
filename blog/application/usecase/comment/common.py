"""Response items shared by the comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import NotFoundError
from blog.domain.model import Comment
from blog.domain.value import ModerationState


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: str | None
    reply_ids: list[str]
    is_approved: bool
    moderation_state: ModerationState
    like_count: int
    created_at: datetime
    updated_at: datetime


class CommentResponse(BaseModel):
    """Single comment with a status message."""

    message: str
    comment: CommentItem


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a domain comment to its response item."""
    return CommentItem(
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        author_id=str(comment.author_id),
        content=comment.content,
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        reply_ids=[str(reply_id) for reply_id in comment.reply_ids],
        is_approved=comment.is_approved,
        moderation_state=comment.moderation_state,
        like_count=comment.like_count,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def parse_id(value: str, resource: str) -> UUID:
    """Parse a UUID string; malformed ids are reported as not found."""
    try:
        return UUID(value)
    except ValueError as e:
        raise NotFoundError(resource, value) from e
