"""Read models for a post's comment section."""

from pydantic import Field

from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel
from blog.domain.value import PostId


class CommentView(DomainModel):
    """A root comment with the replies visible to the viewer, oldest first."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of root comments, newest first."""

    post_id: PostId
    comments: list[CommentView]
    total_roots: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool


class ModerationQueuePage(DomainModel):
    """One page of comments across all posts, newest first."""

    comments: list[Comment]
    total: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool
