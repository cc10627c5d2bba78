"""Post entity, as far as the comment core needs it.

Posts are owned by the content management side of the platform. The
comment core only reads their publication status and keeps the root
comment counter up to date.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post referenced by comments."""

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    author_id: UserId
    status: PostStatus = PostStatus.DRAFT
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_published(self) -> bool:
        """Only published posts accept and expose comments."""
        return self.status == PostStatus.PUBLISHED
